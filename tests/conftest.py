"""Shared page and payload fixtures modelled on the three live sources."""
from __future__ import annotations

import json

import pytest

HE_PAGE = """
<html><body>
<div id="prefixes">
<table id="table_prefixes4" class="w100p">
  <thead><tr><th>Prefix</th><th>Description</th></tr></thead>
  <tbody>
    <tr>
      <td class="nowrap"><a href="/net/1.2.3.0/24">1.2.3.0/24</a></td>
      <td><div class="flag alignright floatright"><img alt="United States" src="/images/flags/us.gif?1" title="United States"></div>
        Example Org
      </td>
    </tr>
    <tr>
      <td class="nowrap"><a href="/net/not-a-cidr">not-a-cidr</a></td>
      <td><div class="flag alignright floatright"><img src="/images/flags/de.gif" title="Germany"></div>Broken Row</td>
    </tr>
    <tr>
      <td class="nowrap"><a href="/net/2001:db8:ffff::/48">2001:db8:ffff::/48</a></td>
      <td><div class="flag alignright floatright"><img src="/images/flags/nl.gif" title="Netherlands"></div>Misfiled V6</td>
    </tr>
    <tr>
      <td class="nowrap"><a href="/net/5.6.7.0/24">5.6.7.0/24</a></td>
      <td><div class="flag alignright floatright"><img src="/images/flags/de.gif" title="Germany"></div>Second Org</td>
    </tr>
  </tbody>
</table>
<table id="table_prefixes6" class="w100p">
  <thead><tr><th>Prefix</th><th>Description</th></tr></thead>
  <tbody>
    <tr>
      <td class="nowrap"><a href="/net/2001:db8::/32">2001:db8::/32</a></td>
      <td><div class="flag alignright floatright"><img src="/images/flags/jp.gif" title="Japan"></div>V6 Only Org</td>
    </tr>
  </tbody>
</table>
</div>
</body></html>
"""

BGPTOOLS_PAGE = """
<html><body>
<table class="table-sortable">
  <thead><tr><th>Country</th><th>Prefix</th><th>Description</th></tr></thead>
  <tbody id="donotscrapebgptools-prefixlist-tbody">
    <tr>
      <td><img class="flag-img" src="/assets/flags/us.svg" title="US"></td>
      <td><a href="/prefix/1.1.1.0/24">1.1.1.0/24</a></td>
      <td>APNIC and Cloudflare DNS Resolver project</td>
    </tr>
    <tr>
      <td><img class="flag-img" src="/assets/flags/gb.svg" title="GB"></td>
      <td><a href="/prefix/2606:4700::/32">2606:4700::/32</a></td>
      <td>Cloudflare, Inc.</td>
    </tr>
    <tr>
      <td><img class="flag-img" src="/assets/flags/de.svg" title="DE"></td>
      <td>not-a-cidr</td>
      <td>Advert row</td>
    </tr>
    <tr>
      <td><img class="flag-img" src="/assets/flags/au.svg" title="AU"></td>
      <td><a href="/prefix/104.16.0.0/13">104.16.0.0/13</a></td>
      <td>Cloudflare, Inc.</td>
    </tr>
  </tbody>
</table>
</body></html>
"""

CLOUDFLARE_PAYLOAD = {
    "status": "ok",
    "status_message": "Query was successful",
    "data": {
        "ipv4_prefixes": [
            {"prefix": "1.1.1.0/24", "country_code": "US", "description": "CLOUDFLARENET"},
        ],
        "ipv6_prefixes": [],
    },
}


@pytest.fixture
def he_page() -> str:
    return HE_PAGE


@pytest.fixture
def bgptools_page() -> str:
    return BGPTOOLS_PAGE


@pytest.fixture
def cloudflare_payload() -> dict:
    return json.loads(json.dumps(CLOUDFLARE_PAYLOAD))


@pytest.fixture
def cloudflare_json(cloudflare_payload: dict) -> str:
    return json.dumps(cloudflare_payload)
