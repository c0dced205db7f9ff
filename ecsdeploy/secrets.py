"""Writing secrets passed through the environment into files."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

SECRETS_FOLDER = "/run/secrets"


@dataclass
class Secret:
    """A secret to expose as a file, optionally split into one file per JSON key."""

    name: str
    keys: list[str] = field(default_factory=list)


def _write_read_only(path: str, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o444)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def create_secret_files(secret: Secret, path: str | os.PathLike[str]) -> None:
    """Read the secret from the environment and store it under ``path``.

    Without keys the raw value goes to ``path/<name>``. With keys the value must
    be a JSON object and each key goes to ``path/<name>/<key>``; the key ``*``
    selects every key of the object.
    """
    value = os.environ.get(secret.name)
    if value is None:
        raise LookupError(f'"{secret.name}" variable not set')

    target = os.path.join(path, secret.name)

    if not secret.keys:
        print(f'inject Secret "{secret.name}" info {target}')
        _write_read_only(target, value.encode("utf-8"))
        return

    try:
        document = json.loads(value)
    except json.JSONDecodeError as exc:
        raise ValueError(f'"{secret.name}" Secret is not a valid JSON document: {exc}') from exc
    if not isinstance(document, dict):
        raise ValueError(f'"{secret.name}" Secret is not a JSON dictionary')

    os.makedirs(target, mode=0o755, exist_ok=True)

    keys = list(document) if "*" in secret.keys else secret.keys
    for key in keys:
        key_path = os.path.join(target, key)
        print(f'inject Secret "{key}" info {key_path}')
        if key not in document:
            raise KeyError(f'"{secret.name}" Secret has no "{key}" key')
        item = document[key]
        if isinstance(item, str):
            raw = item
        else:
            raw = json.dumps(item, separators=(",", ":"), ensure_ascii=False)
        _write_read_only(key_path, raw.encode("utf-8"))


def _field(data: Mapping[str, Any], name: str) -> Any:
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == name:
            return value
    return None


def _secret_from_json(data: Any) -> Secret:
    if not isinstance(data, Mapping):
        raise ValueError("each secret must be a JSON object")
    name = _field(data, "name")
    keys = _field(data, "keys")
    if name is None:
        name = ""
    if not isinstance(name, str):
        raise ValueError("secret name must be a string")
    if keys is None:
        keys = []
    if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
        raise ValueError("secret keys must be a list of strings")
    return Secret(name=name, keys=list(keys))


def main(argv: list[str] | None = None) -> int:
    """Create the secret files described by a JSON encoded list of secrets."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write("usage: secrets <json encoded []Secret>")
        return 1
    try:
        entries = json.loads(args[0])
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise ValueError("expected a JSON list of secrets")
        secrets = [_secret_from_json(entry) for entry in entries]
    except ValueError as exc:
        sys.stderr.write(str(exc))
        return 1

    for secret in secrets:
        try:
            create_secret_files(secret, SECRETS_FOLDER)
        except (LookupError, ValueError, OSError) as exc:
            message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
            sys.stderr.write(str(message))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())