# Area: Core
"""
fair_rps.commitment — HMAC commitment to the opponent's move
=============================================================

The opponent picks its move first. Before the user chooses, the game
publishes ``HMAC(key, move)``; after the user chooses, it reveals the key
so anyone can recompute the digest and confirm the move was not changed.

Key material comes from an injected ``RandomSource``. The default wraps
``secrets`` (the OS CSPRNG); there is no fallback to a weaker generator.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol
import hmac
import logging
import secrets

from .errors import CommitmentError, EntropyError

logger = logging.getLogger("fair_rps.commitment")

DEFAULT_KEY_BYTES = 32
MIN_KEY_BYTES = 32
DEFAULT_ALGORITHM = "sha3_256"

# Digest algorithms with at least 256 bits of output
SUPPORTED_ALGORITHMS = ("sha256", "sha3_256", "sha512", "sha3_512")


class RandomSource(Protocol):
    """Source of randomness for keys and the opponent's move."""

    def token_bytes(self, n: int) -> bytes: ...

    def randbelow(self, n: int) -> int: ...


class SystemRandomSource:
    """RandomSource backed by the operating system's CSPRNG."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


def compute_digest(key: bytes, move: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Hex HMAC of the UTF-8 bytes of ``move`` under ``key``."""
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise CommitmentError(
            f"Unsupported digest algorithm {algorithm!r}; "
            f"choose one of {', '.join(SUPPORTED_ALGORITHMS)}"
        )
    return hmac.new(key, move.encode("utf-8"), algorithm).hexdigest()


def verify_commitment(
    key_hex: str,
    move: str,
    digest: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> bool:
    """
    Recompute the digest from a revealed key and compare.

    Raises
    ------
    ValueError
        If ``key_hex`` is not valid hexadecimal.
    """
    key = bytes.fromhex(key_hex)
    expected = compute_digest(key, move, algorithm)
    return hmac.compare_digest(
        expected.encode("ascii"),
        digest.strip().lower().encode("utf-8"),
    )


@dataclass(frozen=True)
class Commitment:
    """Published half of a commitment: the digest and how it was made."""
    digest: str
    algorithm: str


class CommitmentGenerator:
    """
    Owns one secret key for one game session.

    Lifecycle: ``generate_key()`` once, ``commit(move)`` once, then
    ``reveal()`` after the user's choice is final.
    """

    def __init__(
        self,
        source: Optional[RandomSource] = None,
        key_bytes: int = DEFAULT_KEY_BYTES,
        algorithm: str = DEFAULT_ALGORITHM,
    ):
        if key_bytes < MIN_KEY_BYTES:
            raise CommitmentError(
                f"Key must be at least {MIN_KEY_BYTES} bytes, got {key_bytes}"
            )
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise CommitmentError(f"Unsupported digest algorithm {algorithm!r}")
        self.source = source or SystemRandomSource()
        self.key_bytes = key_bytes
        self.algorithm = algorithm
        self._key: Optional[bytes] = None
        self._commitment: Optional[Commitment] = None

    @property
    def has_key(self) -> bool:
        return self._key is not None

    def generate_key(self) -> None:
        """Draw a fresh key from the random source. Allowed once."""
        if self._key is not None:
            raise CommitmentError("Key already generated for this session")
        try:
            key = self.source.token_bytes(self.key_bytes)
        except (OSError, NotImplementedError) as e:
            raise EntropyError("key", str(e), requested_bytes=self.key_bytes) from e
        if not isinstance(key, bytes) or len(key) != self.key_bytes:
            raise EntropyError(
                "key",
                f"source returned {len(key) if isinstance(key, bytes) else type(key).__name__}",
                requested_bytes=self.key_bytes,
            )
        self._key = key
        logger.debug(f"Generated {self.key_bytes}-byte key")

    def commit(self, move: str) -> Commitment:
        """Bind to ``move``. Generates the key first if needed."""
        if self._commitment is not None:
            raise CommitmentError("Commitment already made for this session")
        if self._key is None:
            self.generate_key()
        digest = compute_digest(self._key, move, self.algorithm)
        self._commitment = Commitment(digest=digest, algorithm=self.algorithm)
        logger.info(f"Committed with {self.algorithm}: {digest}")
        return self._commitment

    def reveal(self) -> str:
        """Hex-encoded key. Only available once a commitment exists."""
        if self._commitment is None or self._key is None:
            raise CommitmentError("Nothing committed yet; refusing to reveal key")
        logger.info("Key revealed")
        return self._key.hex()
