"""Deterministic random number generation with isolated streams.

Each consumer of randomness gets its own independent stream derived from a
master seed. This ensures that:

1. A map is fully reproducible from the same master seed
2. Extra draws in one domain never shift the sequence of another domain
3. Streams are stable across interpreter sessions

Usage:
    # At startup
    from labyrinth.util import rng
    rng.init(config.RANDOM_SEED)

    # In any module - cache the stream reference
    _rng = rng.get("map.tiles")

    def coin_flip(p: float) -> bool:
        return _rng.random() < p

    # After rng.reset(), cached references automatically use the new stream

Streams handed out by one provider share that provider's reentrant lock.
Hold `stream.lock` around a group of draws that must come from one contiguous
block of the sequence when other threads use the same provider.

Domain naming convention (hierarchical):
    - "map.tiles"
"""

from __future__ import annotations

import threading
import zlib
from random import Random
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from labyrinth.types import RandomSeed


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    This wrapper allows callers to cache a reference that survives reset().
    Every call is forwarded to the underlying Random instance, which is looked
    up fresh each time from the provider.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def lock(self) -> threading.RLock:
        """The provider-wide lock guarding every stream of this provider."""
        return self._provider.lock

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        with self._provider.lock:
            return self._provider._get_raw(self._domain).random()


# Type alias for functions that accept either Random or RNGStream.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Provides isolated RNG streams for different subsystems.

    Each domain gets its own Random instance derived deterministically
    from the master seed. Domains are identified by string names. Stream
    creation, draws and reset() all happen under one reentrant lock.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}
        self._lock = threading.RLock()

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def get(self, domain: str) -> RNGStream:
        """Get an RNG stream for the named domain.

        Returns a proxy object that can be cached. The proxy automatically
        uses the current underlying RNG, even after reset().

        Args:
            domain: Hierarchical name like "map.tiles"

        Returns:
            An RNGStream proxy drawing from the domain's Random instance
        """
        with self._lock:
            if domain not in self._proxies:
                self._proxies[domain] = RNGStream(self, domain)
            return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        """Get the raw Random instance for a domain (internal use)."""
        with self._lock:
            if domain not in self._streams:
                if self._master_seed is None:
                    # No seed: use system entropy for non-deterministic behavior
                    self._streams[domain] = Random()
                else:
                    # crc32 instead of hash(): hash() of str is salted per process
                    derived_seed = zlib.crc32(
                        f"{self._master_seed}:{domain}".encode()
                    )
                    self._streams[domain] = Random(derived_seed)
            return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reset all streams with a new master seed.

        Existing RNGStream proxies remain valid and will use the new streams.
        """
        with self._lock:
            self._master_seed = master_seed
            self._streams.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None
_provider_lock = threading.Lock()


def init(master_seed: RandomSeed = None) -> None:
    """Initialize the global RNG provider with a master seed.

    If a provider already exists, resets it instead of creating a new one so
    cached RNGStream proxies keep working.
    """
    global _provider
    with _provider_lock:
        if _provider is not None:
            _provider.reset(master_seed)
        else:
            _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Get an RNG stream for the named domain from the global provider.

    If the provider hasn't been initialized yet, it is auto-initialized with
    a None seed, which gives non-deterministic behavior. Call init() explicitly
    at startup to make the global streams reproducible.
    """
    global _provider
    with _provider_lock:
        if _provider is None:
            _provider = RNGProvider(None)
        provider = _provider
    return provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    """Reset all global RNG streams with a new master seed.

    Use this when regenerating a level from scratch.
    Existing cached RNGStream references remain valid.
    """
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
