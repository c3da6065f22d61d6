"""Road network topology: links, junctions, tiles and their storage gateways."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from roadnet.addressing import LogicalAddress
from roadnet.geometry import Curve, InertialCoord

_T = TypeVar("_T")

Connection = tuple[int, int, bool]


@dataclass
class Segment:
    """An individual piece of road described by its reference curves."""

    reference: list[Curve] = field(default_factory=list)


@dataclass
class Tile:
    """A road piece such as a straight or a circular curve on a link."""

    id: int
    link: int
    segments: list[Segment] = field(default_factory=list)


@dataclass
class Junction:
    """A meeting point of links, with the links entering and leaving it."""

    id: int
    incoming: list[int] = field(default_factory=list)
    outgoing: list[int] = field(default_factory=list)

    def add_outgoing(self, link_id: int) -> None:
        """Record a link that leaves this junction."""
        self.outgoing.append(link_id)

    def add_incoming(self, link_id: int) -> None:
        """Record a link that enters this junction."""
        self.incoming.append(link_id)

    def num_outgoing(self) -> int:
        """Number of links leaving this junction."""
        return len(self.outgoing)

    def num_incoming(self) -> int:
        """Number of links entering this junction."""
        return len(self.incoming)


@dataclass
class Link:
    """A directed connection between two junctions."""

    id: int
    tiles: list[int] = field(default_factory=list)
    origin: int | None = None
    destination: int | None = None


@dataclass
class Routing:
    """Next-hop information for reaching a destination from a junction."""

    junction: int
    destination: LogicalAddress
    next_hop: LogicalAddress


def _or_empty(fetch: Callable[[], list[_T]]) -> list[_T]:
    try:
        return fetch()
    except sqlite3.Error:
        return []


@dataclass
class Network:
    """A road network of links, junctions and tiles."""

    links: list[Link] = field(default_factory=list)
    junctions: list[Junction] = field(default_factory=list)
    tiles: list[Tile] = field(default_factory=list)
    routing: list[Routing] = field(default_factory=list)

    @classmethod
    def from_gateways(
        cls,
        link_gateway: LinkGateway,
        junction_gateway: JunctionGateway,
        tile_gateway: TileGateway,
    ) -> Network:
        """Load a network from storage; tables that cannot be read count as empty."""
        network = cls(
            links=_or_empty(link_gateway.find_all),
            junctions=_or_empty(junction_gateway.find_all),
        )
        network.set_junction_connections(_or_empty(junction_gateway.find_connections))
        network.tiles = _or_empty(tile_gateway.find_all)
        return network

    def add_link(self, link: Link) -> None:
        """Append a link to the network."""
        self.links.append(link)

    def set_junction_connections(self, connections: Iterable[Connection]) -> None:
        """Attach links to junctions from ``(junction_id, link_id, outgoing)`` rows."""
        for junction_id, link_id, outgoing in connections:
            junction = self.junction(junction_id)
            if outgoing:
                junction.add_outgoing(link_id)
            else:
                junction.add_incoming(link_id)

    def junction(self, junction_id: int) -> Junction:
        """Return the junction with the given one-based id."""
        if not 1 <= junction_id <= len(self.junctions):
            raise IndexError(f"No junction with id {junction_id}")
        return self.junctions[junction_id - 1]

    def num_links(self) -> int:
        """Number of links in the network."""
        return len(self.links)

    def num_junctions(self) -> int:
        """Number of junctions in the network."""
        return len(self.junctions)

    def num_tiles(self) -> int:
        """Number of tiles in the network."""
        return len(self.tiles)

    def num_route_info(self) -> int:
        """Number of routing entries in the network."""
        return len(self.routing)


@dataclass
class NetworkBuilder:
    """Builds a network step by step, numbering links and junctions from zero."""

    links: list[Link] = field(default_factory=list)
    junctions: list[Junction] = field(default_factory=list)
    straights: list[tuple[InertialCoord, float]] = field(default_factory=list)
    next_junction: int = 0
    next_link: int = 0

    def create_link(self) -> None:
        """Create a link leaving the most recently added junction, if any."""
        link = Link(self.next_link)
        self.links.append(link)
        self.next_link += 1
        if self.junctions:
            self.junctions[-1].add_outgoing(link.id)

    def add_junction(self) -> None:
        """Add a new junction."""
        self.junctions.append(Junction(self.next_junction))
        self.next_junction += 1

    def add_straight(self, pos: InertialCoord, length: float) -> None:
        """Record a straight starting at ``pos``; it does not change the topology."""
        self.straights.append((pos, length))

    def build(self) -> Network:
        """Return a network made of the links and junctions built so far."""
        return Network(links=list(self.links), junctions=list(self.junctions))


@dataclass
class LinkGateway:
    """Reads links from a database."""

    connection: sqlite3.Connection

    def find_all(self) -> list[Link]:
        """Return every link stored in the ``links`` table."""
        rows = self.connection.execute("SELECT * FROM links;")
        return [
            Link(int(row[0]), origin=int(row[1]), destination=int(row[2]))
            for row in rows
        ]


@dataclass
class JunctionGateway:
    """Reads junctions and their link connections from a database."""

    connection: sqlite3.Connection

    def find_all(self) -> list[Junction]:
        """Return every junction stored in the ``junctions`` table."""
        rows = self.connection.execute("SELECT * FROM junctions;")
        return [Junction(int(row[0])) for row in rows]

    def find_connections(self) -> list[Connection]:
        """Return ``(junction_id, link_id, outgoing)`` rows of ``junctions_links``."""
        rows = self.connection.execute("SELECT * FROM junctions_links;")
        return [(int(row[0]), int(row[1]), bool(row[2])) for row in rows]


@dataclass
class TileGateway:
    """Reads tiles from a database."""

    connection: sqlite3.Connection

    def find_all(self) -> list[Tile]:
        """Return every tile stored in the ``tiles`` table."""
        rows = self.connection.execute("SELECT * FROM tiles;")
        return [Tile(int(row[0]), int(row[1])) for row in rows]