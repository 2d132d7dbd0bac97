"""Unit tests for InterfaceScanner."""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Type

import pytest

from interface_processor.application.scanner import InterfaceScanner
from interface_processor.domain import (
    DiscoveryError,
    EnableInterfaceProcessor,
    INamespaceEnumerator,
    InterfaceProcessorHandler,
    Marker,
    MarkerTable,
    MethodInterceptor,
)


class EchoHandler(MethodInterceptor):
    def intercept(self, target, method, args, kwargs):
        return args


class Greeter(ABC):
    @abstractmethod
    def greeting(self, text): ...


class StatusApi(ABC):
    @abstractmethod
    def current(self): ...


class Unmarked(ABC):
    @abstractmethod
    def run(self): ...


class HttpClient(Marker):
    pass


class Tag(Marker):
    pass


class StubEnumerator(INamespaceEnumerator):
    """Enumerator returning fixed types per namespace and recording visits."""

    def __init__(self, types: Dict[str, List[Type]]) -> None:
        self.types = types
        self.visited: List[str] = []

    def list_types(self, namespace: str) -> Iterator[Type]:
        self.visited.append(namespace)
        if namespace not in self.types:
            raise DiscoveryError(namespace, "unknown")
        yield from self.types[namespace]


@pytest.fixture
def table():
    table = MarkerTable()
    table.attach(Greeter, InterfaceProcessorHandler(EchoHandler))
    table.attach(HttpClient, InterfaceProcessorHandler(EchoHandler))
    table.attach(StatusApi, HttpClient())
    return table


class TestCandidateFilter:
    """Test cases for candidate filtering."""

    def test_direct_designation_is_candidate(self, table):
        """Test that a directly designated interface is a candidate."""
        assert InterfaceScanner(StubEnumerator({}), table).is_candidate(Greeter)

    def test_meta_marker_designation_is_candidate(self, table):
        """Test that an interface marked by a meta-marker is a candidate."""
        assert InterfaceScanner(StubEnumerator({}), table).is_candidate(StatusApi)

    def test_unmarked_type_is_not_candidate(self, table):
        """Test that types without markers are skipped."""
        assert not InterfaceScanner(StubEnumerator({}), table).is_candidate(Unmarked)

    def test_marker_without_designation_is_candidate(self, table):
        """Test that any marker makes a candidate; its handler is checked later."""
        table.attach(Unmarked, Tag())

        assert InterfaceScanner(StubEnumerator({}), table).is_candidate(Unmarked)

    def test_enable_marker_alone_is_not_candidate(self, table):
        """Test that the enable marker alone does not make a candidate."""
        table.attach(Unmarked, EnableInterfaceProcessor())

        assert not InterfaceScanner(StubEnumerator({}), table).is_candidate(Unmarked)

    def test_marker_type_is_not_candidate(self, table):
        """Test that the meta-marker itself is skipped."""
        assert not InterfaceScanner(StubEnumerator({}), table).is_candidate(HttpClient)

    def test_local_type_is_not_candidate(self, table):
        """Test that local classes are skipped even when designated."""

        class LocalApi(ABC):
            @abstractmethod
            def run(self): ...

        table.attach(LocalApi, InterfaceProcessorHandler(EchoHandler))

        assert not InterfaceScanner(StubEnumerator({}), table).is_candidate(LocalApi)

    def test_concrete_designated_class_is_still_candidate(self, table):
        """Test that interface-ness is not checked while scanning."""
        table.attach(EchoHandler, InterfaceProcessorHandler(EchoHandler))

        assert InterfaceScanner(StubEnumerator({}), table).is_candidate(EchoHandler)


class TestScan:
    """Test cases for scanning namespaces."""

    def test_scan_yields_candidates_only(self, table):
        """Test that scanning filters the enumerated types."""
        enumerator = StubEnumerator({"app": [EchoHandler, Greeter, HttpClient, StatusApi, Unmarked]})

        assert list(InterfaceScanner(enumerator, table).scan({"app"})) == [Greeter, StatusApi]

    def test_scan_unions_namespaces_without_duplicates(self, table):
        """Test that a type found in two namespaces is yielded once."""
        enumerator = StubEnumerator({"app": [Greeter, StatusApi], "app.sub": [StatusApi]})

        assert list(InterfaceScanner(enumerator, table).scan({"app", "app.sub"})) == [Greeter, StatusApi]

    def test_scan_visits_namespaces_in_sorted_order(self, table):
        """Test deterministic namespace order."""
        enumerator = StubEnumerator({"b": [StatusApi], "a": [Greeter]})

        assert list(InterfaceScanner(enumerator, table).scan({"b", "a"})) == [Greeter, StatusApi]
        assert enumerator.visited == ["a", "b"]

    def test_scan_is_lazy(self, table):
        """Test that nothing is enumerated until iteration starts."""
        enumerator = StubEnumerator({"app": [Greeter]})
        candidates = InterfaceScanner(enumerator, table).scan({"app"})

        assert enumerator.visited == []
        assert next(candidates) is Greeter

    def test_scan_propagates_discovery_errors(self, table):
        """Test that enumeration failures are not swallowed."""
        with pytest.raises(DiscoveryError):
            list(InterfaceScanner(StubEnumerator({}), table).scan({"missing"}))
