"""URL value object used for canonical-URL comparison.

A Url is an absolute URL plus the path of the application entry point
(the "script path"). Mounting an application under a prefix changes the
script path, and with it the base path that links and templates are
built from.

Example:
    url = Url.parse("https://example.com/app/hello?b=2&a=1", script_path="/app/")
    url.base_url                                        # "https://example.com/app/"
    url.is_equal("https://EXAMPLE.com/app/hello?a=1&b=2")   # True
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union
from urllib.parse import parse_qsl, unquote, urlencode, urlsplit

DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ftp": 21,
}


@dataclass(frozen=True)
class Url:
    """Immutable absolute URL with a script path.

    The query is kept as ordered (name, value) pairs so that repeated
    parameters survive and the Url stays hashable.
    """

    scheme: str = ""
    user: str = ""
    password: str = ""
    host: str = ""
    explicit_port: int | None = None
    path: str = "/"
    query: tuple[tuple[str, str], ...] = ()
    fragment: str = ""
    script_path: str = "/"

    @classmethod
    def parse(cls, url: str, script_path: str = "/") -> Url:
        """Parse an absolute URL string.

        Args:
            url: URL to parse.
            script_path: Path of the application entry point.

        Returns:
            Parsed Url.

        Raises:
            ValueError: If the URL is malformed (e.g. invalid port).
        """
        parts = urlsplit(url)
        return cls(
            scheme=parts.scheme.lower(),
            user=unquote(parts.username or ""),
            password=unquote(parts.password or ""),
            host=(parts.hostname or "").lower(),
            explicit_port=parts.port,
            path=parts.path or "/",
            query=tuple(parse_qsl(parts.query, keep_blank_values=True)),
            fragment=parts.fragment,
            script_path=script_path or "/",
        )

    @property
    def port(self) -> int | None:
        """Explicit port, or the default port of the scheme."""
        if self.explicit_port is not None:
            return self.explicit_port
        return DEFAULT_PORTS.get(self.scheme)

    @property
    def authority(self) -> str:
        """user:password@host:port, with the port omitted when it is the default."""
        authority = self.host
        if self.explicit_port is not None and self.explicit_port != DEFAULT_PORTS.get(self.scheme):
            authority += f":{self.explicit_port}"
        if self.user:
            userinfo = self.user + (f":{self.password}" if self.password else "")
            authority = f"{userinfo}@{authority}"
        return authority

    @property
    def host_url(self) -> str:
        """Scheme and authority, e.g. ``https://example.com``."""
        return f"{self.scheme}://{self.authority}" if self.scheme else f"//{self.authority}"

    @property
    def base_path(self) -> str:
        """Script path up to and including its last slash."""
        position = self.script_path.rfind("/")
        return self.script_path[: position + 1] if position >= 0 else "/"

    @property
    def base_url(self) -> str:
        return self.host_url + self.base_path

    @property
    def query_string(self) -> str:
        return urlencode(self.query)

    def with_path(self, path: str) -> Url:
        """Return a copy with a different path."""
        return replace(self, path=path)

    def is_equal(self, other: Union[str, Url]) -> bool:
        """Compare two URLs ignoring query parameter order and escaping.

        Args:
            other: URL string or Url to compare against.

        Returns:
            True if both address the same resource.
        """
        if isinstance(other, str):
            other = Url.parse(other)
        return (
            other.scheme == self.scheme
            and other.host.lower() == self.host.lower()
            and other.port == self.port
            and other.user == self.user
            and other.password == self.password
            and _unescape_path(other.path) == _unescape_path(self.path)
            and sorted(other.query) == sorted(self.query)
            and other.fragment == self.fragment
        )

    def __str__(self) -> str:
        url = self.host_url + self.path
        if self.query:
            url += "?" + self.query_string
        if self.fragment:
            url += "#" + self.fragment
        return url


def _unescape_path(path: str) -> str:
    # %2F stays escaped so that "a%2Fb" and "a/b" remain different paths
    return "%2F".join(unquote(part) for part in path.replace("%2f", "%2F").split("%2F"))
