"""Registry of the supported hash algorithms.

The set of algorithms is closed: ``HashAlgorithm`` enumerates them and
``build_default_registry`` describes each one with its display name, its
lowercase aliases, and a factory for a streaming accumulator. Registration
order is the order of every checksum list hash1 produces.
"""

from __future__ import annotations

import functools
import hashlib
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from hash1.exceptions import UnknownAlgorithmError


class Hasher(Protocol):
    """Streaming hash accumulator."""

    @property
    def block_size(self) -> int:
        """Internal block size in bytes, or 0 if unknown."""
        ...

    def update(self, data: bytes, /) -> None:
        """Feed bytes to the accumulator."""
        ...

    def hexdigest(self) -> str:
        """Return the lowercase hexadecimal digest."""
        ...


class HashAlgorithm(Enum):
    """Supported hash algorithms, valued by their canonical name."""

    MD5 = "md5"
    SHA1 = "sha-1"
    SHA224 = "sha-224"
    SHA256 = "sha-256"
    SHA384 = "sha-384"
    SHA512 = "sha-512"
    SHA512_224 = "sha-512/224"
    SHA512_256 = "sha-512/256"
    SHA3_224 = "sha3-224"
    SHA3_256 = "sha3-256"
    SHA3_384 = "sha3-384"
    SHA3_512 = "sha3-512"
    SHAKE128_256 = "shake128-256"
    SHAKE256_512 = "shake256-512"
    BLAKE2S_256 = "blake2s-256"
    BLAKE2B_256 = "blake2b-256"
    BLAKE2B_384 = "blake2b-384"
    BLAKE2B_512 = "blake2b-512"


class _FixedLengthShake:
    """SHAKE accumulator whose hexdigest has a fixed output length."""

    def __init__(self, name: str, digest_size: int) -> None:
        self._hash = hashlib.new(name)
        self.digest_size = digest_size

    @property
    def block_size(self) -> int:
        return self._hash.block_size

    def update(self, data: bytes, /) -> None:
        self._hash.update(data)

    def hexdigest(self) -> str:
        return self._hash.hexdigest(self.digest_size)


def name_variants(canonical: str) -> tuple[str, ...]:
    """Return the canonical name and its spelling variants.

    Hyphens and slashes may be written as underscores or omitted, e.g.
    ``sha-512/224`` also resolves as ``sha_512_224`` and ``sha512224``.
    The canonical name comes first and no variant repeats.
    """
    variants = [""]
    for char in canonical:
        if char in "-/":
            variants = [
                v + alt for v in variants for alt in (char, "_", "")
            ]
        else:
            variants = [v + char for v in variants]
    return tuple(dict.fromkeys(variants))


@dataclass(slots=True, frozen=True)
class AlgorithmDescriptor:
    """Description of one supported hash algorithm.

    Attributes:
        algorithm: Enum member identifying the algorithm
        display_name: Name used in output and error messages
        aliases: Lowercase names accepted from users, canonical first
        factory: Callable creating a fresh streaming accumulator

    """

    algorithm: HashAlgorithm
    display_name: str
    aliases: tuple[str, ...]
    factory: Callable[[], Hasher]

    @property
    def name(self) -> str:
        """Canonical lowercase name."""
        return self.algorithm.value

    def new(self) -> Hasher:
        """Create a fresh streaming accumulator."""
        return self.factory()


class AlgorithmRegistry:
    """Immutable, ordered table of hash algorithm descriptors."""

    def __init__(self, descriptors: Iterable[AlgorithmDescriptor]) -> None:
        """Build the lookup tables and check their invariants.

        Args:
            descriptors: Descriptors in their display order

        Raises:
            ValueError: If display names or aliases collide, or an alias
                is not lowercase

        """
        self._descriptors = tuple(descriptors)
        self._ranks: dict[HashAlgorithm, int] = {}
        self._aliases: dict[str, AlgorithmDescriptor] = {}
        display_names: set[str] = set()

        for rank, desc in enumerate(self._descriptors):
            if desc.algorithm in self._ranks:
                msg = f"algorithm {desc.algorithm.name} registered twice"
                raise ValueError(msg)
            if desc.display_name in display_names:
                msg = f"duplicate display name {desc.display_name!r}"
                raise ValueError(msg)
            display_names.add(desc.display_name)
            self._ranks[desc.algorithm] = rank

            for alias in desc.aliases:
                if alias != alias.lower():
                    msg = f"alias {alias!r} is not lowercase"
                    raise ValueError(msg)
                if alias in self._aliases:
                    msg = (
                        f"alias {alias!r} of {desc.display_name} is "
                        f"already used by {self._aliases[alias].display_name}"
                    )
                    raise ValueError(msg)
                self._aliases[alias] = desc

    def __iter__(self) -> Iterator[AlgorithmDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, HashAlgorithm):
            return name in self._ranks
        return name in self._aliases

    def all_descriptors(self) -> tuple[AlgorithmDescriptor, ...]:
        """Return every descriptor in registration order."""
        return self._descriptors

    def resolve(self, name: str) -> AlgorithmDescriptor | None:
        """Look up a descriptor by alias.

        The lookup is case-sensitive; callers lowercase user input first.
        """
        return self._aliases.get(name)

    def require(self, name: str | HashAlgorithm) -> AlgorithmDescriptor:
        """Look up a descriptor by alias or enum member.

        Raises:
            UnknownAlgorithmError: If the name does not resolve

        """
        if isinstance(name, HashAlgorithm):
            return self.descriptor(name)
        desc = self.resolve(name)
        if desc is None:
            raise UnknownAlgorithmError(name)
        return desc

    def descriptor(self, algorithm: HashAlgorithm) -> AlgorithmDescriptor:
        """Return the descriptor of a registered algorithm.

        Raises:
            UnknownAlgorithmError: If the algorithm is not registered

        """
        rank = self._ranks.get(algorithm)
        if rank is None:
            raise UnknownAlgorithmError(algorithm.value)
        return self._descriptors[rank]

    def rank(self, algorithm: HashAlgorithm) -> int:
        """Return the position of an algorithm in registration order."""
        return self._ranks[algorithm]


def _hashlib_factory(name: str, **kwargs: int) -> Callable[[], Hasher]:
    if kwargs:
        constructor = getattr(hashlib, name)
        return functools.partial(constructor, **kwargs)
    return functools.partial(hashlib.new, name)


# (algorithm, display name, factory, extra aliases)
_DEFAULT_ALGORITHMS: tuple[
    tuple[HashAlgorithm, str, Callable[[], Hasher], tuple[str, ...]], ...
] = (
    (HashAlgorithm.MD5, "MD5", _hashlib_factory("md5"), ("m",)),
    (HashAlgorithm.SHA1, "SHA-1", _hashlib_factory("sha1"), ()),
    (HashAlgorithm.SHA224, "SHA-224", _hashlib_factory("sha224"), ()),
    (HashAlgorithm.SHA256, "SHA-256", _hashlib_factory("sha256"), ("s",)),
    (HashAlgorithm.SHA384, "SHA-384", _hashlib_factory("sha384"), ()),
    (HashAlgorithm.SHA512, "SHA-512", _hashlib_factory("sha512"), ()),
    (
        HashAlgorithm.SHA512_224,
        "SHA-512/224",
        _hashlib_factory("sha512_224"),
        (),
    ),
    (
        HashAlgorithm.SHA512_256,
        "SHA-512/256",
        _hashlib_factory("sha512_256"),
        (),
    ),
    (HashAlgorithm.SHA3_224, "SHA3-224", _hashlib_factory("sha3_224"), ()),
    (HashAlgorithm.SHA3_256, "SHA3-256", _hashlib_factory("sha3_256"), ()),
    (HashAlgorithm.SHA3_384, "SHA3-384", _hashlib_factory("sha3_384"), ()),
    (HashAlgorithm.SHA3_512, "SHA3-512", _hashlib_factory("sha3_512"), ()),
    (
        HashAlgorithm.SHAKE128_256,
        "SHAKE128-256",
        functools.partial(_FixedLengthShake, "shake_128", 32),
        (),
    ),
    (
        HashAlgorithm.SHAKE256_512,
        "SHAKE256-512",
        functools.partial(_FixedLengthShake, "shake_256", 64),
        (),
    ),
    (
        HashAlgorithm.BLAKE2S_256,
        "BLAKE2s-256",
        _hashlib_factory("blake2s", digest_size=32),
        (),
    ),
    (
        HashAlgorithm.BLAKE2B_256,
        "BLAKE2b-256",
        _hashlib_factory("blake2b", digest_size=32),
        (),
    ),
    (
        HashAlgorithm.BLAKE2B_384,
        "BLAKE2b-384",
        _hashlib_factory("blake2b", digest_size=48),
        (),
    ),
    (
        HashAlgorithm.BLAKE2B_512,
        "BLAKE2b-512",
        _hashlib_factory("blake2b", digest_size=64),
        (),
    ),
)


def build_default_registry() -> AlgorithmRegistry:
    """Build the registry of the eighteen supported algorithms."""
    return AlgorithmRegistry(
        AlgorithmDescriptor(
            algorithm=algorithm,
            display_name=display_name,
            aliases=name_variants(algorithm.value) + extra_aliases,
            factory=factory,
        )
        for algorithm, display_name, factory, extra_aliases in (
            _DEFAULT_ALGORITHMS
        )
    )


@functools.cache
def default_registry() -> AlgorithmRegistry:
    """Return the shared default registry, built on first use."""
    return build_default_registry()
