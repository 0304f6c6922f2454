# patterndemos

Eight small, self-contained demonstrations of classic object-oriented design
patterns. Each lives in its own module, can be imported and used from Python,
and can be run as a command that prints what the pattern does.

| Module | Pattern | What it shows |
| --- | --- | --- |
| `patterndemos.abstract_factory` | Abstract Factory | `SimpleCarFactory` and `LuxuryCarFactory` build a `Car` from matching `Tire` and `Body` parts; `factory_for` picks one by name |
| `patterndemos.adapter` | Adapter | `RectangleAdapter` presents a corner-based `LegacyRectangle` through the origin-and-size `Rectangle` interface |
| `patterndemos.builder` | Builder | a `Director` drives a `JetBuilder` or `PropellerBuilder` to assemble a `Plane` |
| `patterndemos.factory` | Factory Method | `create_toy` makes a `Car`, `Bike` or `Plane` toy from type code 1, 2 or 3 |
| `patterndemos.observer` | Observer | `LeftObserver`, `MiddleObserver` and `RightObserver` react when a `Car`'s `position` changes |
| `patterndemos.prototype` | Prototype | a `BulletFactory` clones `SimpleBullet` and `GoodBullet` prototypes by `BulletType` |
| `patterndemos.singleton` | Singleton | `GameSetting.get_instance()` always returns the same settings object |
| `patterndemos.strategy` | Strategy | a `Mob` attacks with a pluggable `FireAttack`, `MaceAttack` or `SwordAttack` |

## Installing

```
pip install .
```

The package has no runtime dependencies. To run its tests:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

```
patterndemos-abstract-factory   # reads "Simple" or anything else (luxury) and prints the car
patterndemos-adapter            # draws a rectangle through the adapter
patterndemos-builder            # builds and shows a jet and a propeller plane
patterndemos-factory            # reads toy types 1, 2 or 3; 0, a non-number or end of input exits
patterndemos-observer           # reads keys l, c or r to steer; b or end of input stops
patterndemos-prototype          # fires a simple and a good bullet
patterndemos-singleton          # shows the default game settings
patterndemos-strategy           # an orc, a dragon and a player trade blows
```

The interactive commands read their input from standard input, so it can also
be piped in, for example `echo "1 3 0" | patterndemos-factory`.

## Using the modules

```python
from patterndemos.abstract_factory import factory_for

car = factory_for("Luxury").build_whole_car()
print(car.details())

from patterndemos.builder import Director, JetBuilder

plane = Director().create_plane(JetBuilder())
plane.show()  # prints the parts and returns the printed lines

from patterndemos.factory import create_toy

toy = create_toy(2)        # a Bike named "Bike", priced 20
create_toy(7)              # raises ValueError

from patterndemos.observer import Car, LeftObserver

watched = Car()
LeftObserver(watched)      # attaches itself to the car
watched.position = -1      # prints "left side"

from patterndemos.prototype import BulletFactory, BulletType

bullet = BulletFactory().create_bullet(BulletType.GOOD)
bullet.fire(100)

from patterndemos.singleton import GameSetting

settings = GameSetting.get_instance()
settings.brightness = 50   # GameSetting() itself raises TypeError

from patterndemos.strategy import Client, FireAttack, Mob

dragon = Mob("Lord Nagafen", 200)
dragon.behaviour = FireAttack()
dragon.attack(Client("Bink", 450))  # prints "Lord Nagafen scorches Bink"
```

A `Mob` with no behaviour attacks with a plain hit. `Car.detach` raises
`ValueError` for an observer that is not attached.

## What it does not do

These are demonstrations only: nothing is saved between runs, and the
commands print to standard output rather than drawing anything on screen.