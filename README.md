# ecosim

A small ecosystem simulation. Herbivores, carnivores and omnivores move across
a field and bounce off its edges. When a creature comes close to one of a
different species, it is pushed away. When it comes close to one of its own
species, a new creature of that species appears at a random place. Creatures
eat the resources they touch, as long as they are able to eat them. A creature
that goes too long without food dies and leaves meat behind.

New resources appear at regular intervals. The current weather decides how
likely each kind of resource is to appear.

## Installation

```
pip install .
```

This also installs `pygame`. The package uses it for the window, for drawing
and for sound.

## Running

```
ecosim
ecosim --name "My world"
```

The program opens a menu with three buttons:

- **Iniciar Simulacion** starts the simulation.
- **Comandos** shows a screen that lists the weather commands.
- **Salir** quits.

During the simulation, type one of the following commands into the text field
at the top of the window, then press **Ejecutar**. Any other text is ignored.

| Command   | Weather | Chance of meat / plant / water |
|-----------|---------|--------------------------------|
| `soleado` | sunny   | 30% / 40% / 30%                |
| `lluvia`  | rain    | 10% / 40% / 50%                |
| `nieve`   | snow    | 50% / 20% / 30%                |

The simulation starts in sunny weather. When the weather changes, the
background and the music change with it. Every resource on the field is
notified of the change and writes a log message about it.

To end the program, press **Terminar** or Escape.

## Rules

| Species   | Eats          | Speed |
|-----------|---------------|-------|
| Herbivore | plants, water | 2.0   |
| Carnivore | meat, water   | 2.5   |
| Omnivore  | everything    | 2.0   |

- The field starts with two creatures of each species and nine resources.
- A new resource appears every 0.7 seconds.
- A creature eats a resource that is less than 30 pixels away.
- Creatures of different species that come within 50 pixels of each other are
  pushed apart.
- Creatures of the same species that come within 50 pixels of each other
  produce offspring. A reproduction strategy waits 5 seconds between births.
- A creature dies after 17 seconds without eating and leaves meat where it
  stood. The hunger clock of every creature restarts when the simulation
  starts.
- At most 30 creatures are alive at any one time.

The simulation clock advances by one sixtieth of a second per frame.

## Using the pieces directly

The simulation logic lives in separate modules, so you can drive it without a
window:

- `ecosim.resources`: `Observer`, the resources `Water`, `Meat` and `Plant`,
  and `ResourceFactory`.
- `ecosim.species.Species`: the three diets, with `can_eat` and `is_rival`.
- `ecosim.environment.Environment`: the weather, its observers, and the music
  and background file names for each kind of weather. `get_instance` returns
  a shared instance, and `reset_instance` discards it.
- `ecosim.resource_container.ResourceContainer`: the resources on the field.
  It registers each resource with the environment as an observer.
- `ecosim.creature_container.CreatureContainer`: the creatures on the field,
  capped at `MAX_CREATURES`.
- `ecosim.generator.ResourceGenerator`: `tick(now)` adds a weather-weighted
  random resource once the interval has elapsed.
- `ecosim.strategies`: `MovementStrategy`, `FeedingStrategy` and
  `DeathStrategy`.
- `ecosim.creatures`: `Herbivore`, `Carnivore`, `Omnivore` and
  `CreatureFactory`.
- `ecosim.reproduction.ReproductionStrategy`: breeding between creatures of
  the same species.
- `ecosim.app.Ecosystem`: a populated world. `handle_command` changes the
  weather, `start_simulation` enters the simulation, `step` advances one
  frame, and `run` opens the window.

Strategies and creatures accept a `clock` callable. Strategies and the
generator also accept a `random.Random`, so runs can be made reproducible in
tests.

```python
from ecosim.app import Ecosystem

eco = Ecosystem("headless")
eco.start_simulation()
eco.handle_command("nieve")
for _ in range(600):
    eco.step()
print(len(eco.creatures), len(eco.resources), eco.environment.climate)
```

## What it does not include

The package ships no images, music or fonts. The window loads its pictures and
tracks by file name from the working directory, for example `Herbivoro.png`,
`Background.mp3` or `lluvia.mp3`. An image that cannot be loaded is not drawn.
If no sound device can be opened, the program runs without sound. The program
does not save or load a world.

## Tests

```
pip install .[test]
pytest
```