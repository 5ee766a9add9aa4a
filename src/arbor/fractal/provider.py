from __future__ import annotations

from abc import abstractmethod
from typing import Any, Generic, TypeVar

import reactivex
from reactivex import abc
from reactivex.disposable import Disposable

from arbor.fractal.store import FractalStore, GeneratedFractal

T = TypeVar("T")


class ObservableProvider(Generic[T]):
    @abstractmethod
    def observable(self) -> reactivex.Observable[T]:
        raise NotImplementedError("")


class _SnapshotForwarder:
    """Store observer that pushes each new snapshot into an rx observer."""

    def __init__(
        self, store: FractalStore, observer: abc.ObserverBase[GeneratedFractal]
    ) -> None:
        self._store = store
        self._observer = observer

    def update(self) -> None:
        self._observer.on_next(self._store.snapshot())


class FractalStateProvider(ObservableProvider[GeneratedFractal]):
    """Expose a :class:`FractalStore` as a cold observable of snapshots.

    Each subscription starts with the current snapshot and stays registered
    with the store until it is disposed.
    """

    def __init__(self, store: FractalStore) -> None:
        self._store = store

    def observable(self) -> reactivex.Observable[GeneratedFractal]:
        def subscribe(
            observer: abc.ObserverBase[GeneratedFractal],
            scheduler: Any = None,
        ) -> abc.DisposableBase:
            forwarder = _SnapshotForwarder(self._store, observer)
            observer.on_next(self._store.snapshot())
            self._store.register(forwarder)
            return Disposable(lambda: self._store.unregister(forwarder))

        return reactivex.create(subscribe)
