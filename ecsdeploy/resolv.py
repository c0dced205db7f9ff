"""Adding DNS search domains to a resolver configuration file."""

from __future__ import annotations

import os
import sys

RESOLV_CONF = "/etc/resolv.conf"


def set_search_domains(path: str | os.PathLike[str], *args: str) -> None:
    """Append a ``search`` directive listing ``args`` to the file at ``path``.

    The file is created with mode 0644 when it does not exist yet.
    """
    search = " ".join(args)
    fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, 0o644)
    with os.fdopen(fd, "a", encoding="utf-8") as handle:
        handle.write("\nsearch " + search)


def main(argv: list[str] | None = None) -> int:
    """Append the domains given on the command line to the resolver configuration."""
    domains = sys.argv[1:] if argv is None else list(argv)
    if not domains:
        sys.stderr.write("usage: resolv DOMAIN [DOMAIN]")
        return 1
    try:
        set_search_domains(RESOLV_CONF, *domains)
    except OSError as exc:
        sys.stderr.write(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())