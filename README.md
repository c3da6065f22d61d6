# roadnet

A small model of a road network. It uses only the standard library and has
four modules:

- `roadnet.addressing`: identifiers of the form `link.tile.segment.lane`
  with an optional mask, as in `2.10.2.-1/1.1.1.1`.
- `roadnet.geometry`: inertial (`x`, `y`, `z`) and logical (`offset`,
  `distance`, `loft`) coordinates, and a curve that converts between them.
- `roadnet.network`: links, junctions and tiles. You can build them in code
  or load them from an SQLite database.
- `roadnet.roads`: the simple `RoadID` (`major`, `minor`) and `Road` types.

## Installation

```
pip install .
```

## Parsing logical addresses

```python
from roadnet.addressing import AddressError, LogicalAddress

addr = LogicalAddress.parse("2.10.2.-1/1.1.1.0")
ident = addr.identifier
print(ident.link, ident.tile, ident.segment, ident.lane)  # 2 10 2 -1
print(addr.mask.lane)  # False

# Without a mask, every field is relevant.
LogicalAddress.parse("1.1.1.0")

try:
    LogicalAddress.parse("-2.10.2.-1")
except AddressError as exc:
    print(exc)  # Expected whole number, got minus sign
```

Parsing rules:

- Only the lane may be negative. A minus sign in any earlier field raises
  `AddressError`.
- The link, tile and segment fields must fit in 16 unsigned bits and the
  lane in 16 signed bits. An earlier field that does not fit is read as
  zero. A final lane that does not fit raises `AddressError`.
- An empty identifier before the `/` raises `AddressError`.
- In a mask, the first digit of each part sets its field. `0` clears the
  field and any other digit sets it. Fields that are not given stay set.

`Identifier.parse` and `Mask.parse` can also be called on their own.
`AddressError` is a subclass of `ValueError`.

## Converting coordinates

```python
from roadnet.geometry import Curve, InertialCoord, LogicalCoord

curve = Curve()
logical = curve.inertial_to_logical(InertialCoord(-1.825, 50.0, 0.0), addr)
inertial = curve.logical_to_inertial(logical)

origin = LogicalCoord.empty()  # zero coordinates, address that selects nothing
```

A curve is an infinite straight. The offset maps to `x`, the distance to
`y` and the loft to `z`. If you call `inertial_to_logical` without an
address, the result carries the empty address.

## Building a network

```python
from roadnet.geometry import InertialCoord
from roadnet.network import NetworkBuilder

builder = NetworkBuilder()
builder.add_junction()
builder.create_link()  # the new link leaves the last junction added
builder.add_straight(InertialCoord(0.0, 0.0, 0.0), 252.0)
network = builder.build()
print(network.num_links())  # 1
```

The builder numbers links and junctions from zero. `add_straight` records
the straight on the builder and leaves the topology unchanged.

## Loading a network from SQLite

The gateways read columns by position, so each table needs its columns in
this order:

- `links`: id, origin, destination
- `junctions`: id
- `junctions_links`: junction id, link id, outgoing flag
- `tiles`: id, link

```python
import sqlite3
from roadnet.network import JunctionGateway, LinkGateway, Network, TileGateway

with sqlite3.connect("network.db") as conn:
    network = Network.from_gateways(
        LinkGateway(conn), JunctionGateway(conn), TileGateway(conn)
    )

print(network.num_links(), network.num_junctions(), network.num_tiles())
junction = network.junction(1)
print(junction.num_outgoing(), junction.num_incoming())
```

If a table cannot be read, it is treated as empty. `Network.junction`
counts junctions from 1, by their position in the list. It raises
`IndexError` for an id outside the range.

## What the package does not do

- It has no command-line program.
- Nothing fills in routing entries. A network's `routing` list stays empty
  unless you add entries yourself, and `num_route_info()` reports its
  length.
- Curves are only straights. Segments and tiles hold no geometry loaded
  from storage.
- It does not write networks back to a database.

## Running the tests

```
pip install ".[test]"
pytest
```