"""Random URLs, URL components, and query items.

Generated URLs always use https and alphanumeric hosts, paths, query
items, and fragments, so they never need percent-encoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, urlunsplit

from devtesting.collection_generation import generate_list
from devtesting.core.types import ClosedRange, HalfOpenRange, RandomNumberGenerator
from devtesting.sampling.numeric import random_integer
from devtesting.values.primitives import random_bool, random_element
from devtesting.values.strings import random_alphanumeric

TOP_LEVEL_DOMAINS = ("com", "edu", "gov", "net", "org")


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class QueryItem:
    """A single ``name[=value]`` query item.  ``value`` is None for a bare name."""

    name: str
    value: str | None = None

    def encode(self) -> str:
        if self.value is None:
            return quote(self.name, safe="")
        return f"{quote(self.name, safe='')}={quote(self.value, safe='')}"


@dataclass(frozen=True, slots=True)
class URLComponents:
    """The parts of a generated URL.

    ``fragment`` and ``query_items`` are None when absent, which is
    distinct from present-but-empty.
    """

    scheme: str
    host: str
    path: str
    fragment: str | None = None
    query_items: tuple[QueryItem, ...] | None = None

    @property
    def query(self) -> str | None:
        if self.query_items is None:
            return None
        return "&".join(item.encode() for item in self.query_items)

    @property
    def url(self) -> str:
        return urlunsplit((self.scheme, self.host, self.path, self.query or "", self.fragment or ""))


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

def _random_count(lower: int, upper: int, generator: RandomNumberGenerator) -> int:
    return random_integer(ClosedRange(lower, upper), generator)


def random_query_item(generator: RandomNumberGenerator) -> QueryItem:
    """3-10 alphanumeric name; 90% of the time a 3-10 alphanumeric value."""
    name = random_alphanumeric(_random_count(3, 10, generator), generator)
    if random_integer(HalfOpenRange(0, 10), generator) == 0:
        return QueryItem(name=name)
    return QueryItem(name=name, value=random_alphanumeric(_random_count(3, 10, generator), generator))


def random_url_components(
    generator: RandomNumberGenerator,
    include_fragment: bool | None = None,
    include_query_items: bool | None = None,
) -> URLComponents:
    """Return https URL components with a random host, path, and optional extras.

    Host is ``subdomainXXXXX.domainXXXXX.<tld>``; the path has 1-5
    segments of 1-5 characters.  When ``include_fragment`` or
    ``include_query_items`` is None, a coin flip decides.
    """
    subdomain = "subdomain" + random_alphanumeric(5, generator)
    domain = "domain" + random_alphanumeric(5, generator)
    tld = random_element(TOP_LEVEL_DOMAINS, generator)
    host = f"{subdomain}.{domain}.{tld}"

    segments = generate_list(
        _random_count(1, 5, generator),
        lambda: random_alphanumeric(_random_count(1, 5, generator), generator),
    )
    path = "/" + "/".join(segments)

    fragment = None
    if include_fragment if include_fragment is not None else random_bool(generator):
        fragment = random_alphanumeric(_random_count(3, 5, generator), generator)

    query_items = None
    if include_query_items if include_query_items is not None else random_bool(generator):
        query_items = tuple(
            generate_list(_random_count(1, 5, generator), lambda: random_query_item(generator))
        )

    return URLComponents(
        scheme="https",
        host=host,
        path=path,
        fragment=fragment,
        query_items=query_items,
    )


def random_url(
    generator: RandomNumberGenerator,
    include_fragment: bool | None = None,
    include_query_items: bool | None = None,
) -> str:
    """Same draws as :func:`random_url_components`, rendered as a URL string."""
    return random_url_components(generator, include_fragment, include_query_items).url
