# mushroomhunt

A small arcade game written with pygame. You walk around a forest clearing
and pick up the mushrooms that appear. Edible mushrooms add points; poisonous
ones take points away and cost a life. A round lasts about 90 seconds. It also
ends when you have picked three poisonous mushrooms. The on-screen text is in
Russian.

## Installing

```
pip install .
```

## Playing

```
mushroomhunt
```

The main menu has four buttons: start, settings, records and exit. Type your
name on the keyboard (Backspace deletes, Enter starts the game). Starting
without a name shows a warning instead. Exit asks for confirmation first.

Controls during a round:

- `W` `A` `S` `D` or the arrow keys: move (diagonal moves are slowed to
  about 0.7 of normal speed)
- `Esc` or `P`: pause menu (resume, settings, back to the main menu)

In dialogs, `Esc` closes the dialog without accepting it. In the settings
dialog this undoes the volume change.

A new mushroom appears every 1.5 seconds at a random spot. Each one
disappears after 5 seconds if nobody picks it.

| Mushroom    | Points |
|-------------|--------|
| White       | +10    |
| Boletus     | +8     |
| Birch       | +8     |
| Chanterelle | +5     |
| Russula     | +2     |
| Toadstool   | -10    |
| Amanita     | -10    |

The screen shows the time left, the score and the lives left. The lives
counter turns red on the last life.

### Command options

```
mushroomhunt [--records-file PATH] [--settings-file PATH] [--resources DIR]
```

- `--records-file`: the records file to use instead of `records.txt` in the
  user data directory.
- `--settings-file`: the settings file to use instead of `settings.json` in
  the user configuration directory.
- `--resources`: a directory with the images and music. Without this option
  the game looks in a `resources` directory next to the package's modules.

## What the package does not include

The package does not ship any images, music or fonts. The resource
directory is expected to hold `images/back.png`, `images/hat.png`,
`images/mush1.png` to `images/mush7.png` and
`sounds/sandbox-serenade-sky-toes-main-version-28029-02-39.wav`. If an
image is missing, the game draws a plain coloured block in its place: a green
background, a blue player and red mushrooms. If the music is missing or no
audio device is available, the game runs silently. The volume setting is
still stored. Text uses the system font named "Saturn" if one is installed,
and pygame's default font if not.

## Records and settings

When a round ends with a score above zero, the name and score are appended to
the records file as a `name:score` line. The records table in the main menu
shows the ten best results, highest first. If there is no records file yet,
it shows a notice instead. The music volume is set with the slider in the
settings dialog. It is kept between sessions only when you press the save
button.

## Using it as a library

The game logic does not need a window. Time passes only when you call
`advance`:

```python
from mushroomhunt.game import Control, Game
from mushroomhunt.records import RecordsManager

game = Game("Alice", records=RecordsManager("records.txt"))
game.press(Control.RIGHT)
game.advance(1000)   # one second of game time
print(game.time_text(), game.score_text(), game.lives_text())
```

- `mushroomhunt.game.Game` holds the round state: the player position,
  `mushrooms`, `score`, `time_left`, `active`, `paused` and `final_message`.
  Its methods include `press`, `release`, `advance`, `pause`, `resume` and
  `spawn_mushroom`. It takes an optional `random.Random` for repeatable
  rounds.
- `mushroomhunt.mushroom.Mushroom` and `MushroomType` give each kind's
  `value()`, `rect()` and `texture_path()`.
- `mushroomhunt.records.RecordsManager` appends to the records file and
  reads it back with `save_record`, `get_records`, `top_records` and
  `table_lines`.
- `mushroomhunt.settings.SettingsStore` loads and saves the stored volume.
  `VolumeSession` applies a slider value at once and then either saves it
  or restores the starting volume.
- `mushroomhunt.app.Application` is the pygame window, and
  `mushroomhunt.app.main` is the command.

## Tests

```
pip install .[test]
pytest
```