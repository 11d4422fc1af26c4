"""
Public key loading for EC2 key pair import.

The key pair resource takes the key material as a string; this reads it from
the operator's local file and rejects anything EC2 would refuse.
"""

from pathlib import Path

from IAC.errors import PublicKeyError

# Key types accepted by EC2 ImportKeyPair
SUPPORTED_KEY_TYPES = (
    "ssh-rsa",
    "ssh-ed25519",
    "ecdsa-sha2-nistp256",
    "ecdsa-sha2-nistp384",
    "ecdsa-sha2-nistp521",
)


def resolve_key_path(path: str | Path) -> Path:
    """Expand ``~`` and return an absolute path."""
    return Path(path).expanduser().resolve()


def read_public_key(path: str | Path) -> str:
    """
    Read an OpenSSH public key file.

    Args:
        path: Path to the .pub file; ``~`` is expanded

    Returns:
        The key line without surrounding whitespace

    Raises:
        PublicKeyError: If the file is missing, empty, or not an OpenSSH public key
    """
    key_path = resolve_key_path(path)
    if not key_path.is_file():
        raise PublicKeyError(f"Public key file not found: {key_path}")

    content = key_path.read_text(encoding="utf-8").strip()
    if not content:
        raise PublicKeyError(f"Public key file is empty: {key_path}")

    if content.startswith("-----BEGIN"):
        raise PublicKeyError(
            f"{key_path} looks like a PEM private key; point public_key_path at the .pub file"
        )

    parts = content.split()
    if len(parts) < 2 or parts[0] not in SUPPORTED_KEY_TYPES:
        raise PublicKeyError(
            f"{key_path} is not an OpenSSH public key "
            f"(expected one of {', '.join(SUPPORTED_KEY_TYPES)})"
        )
    return content
