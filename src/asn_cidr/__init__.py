"""asn-cidr - download the announced CIDR prefixes of an ASN.

Three interchangeable sources are supported: the bgpview.io JSON API and the
HTML prefix tables of bgp.he.net and bgp.tools. Every source is normalized to
the same ``PrefixRecord`` shape before it is written out.
"""

__version__ = "0.1.0"
