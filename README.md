# kara

A small top-down dungeon adventure built on `pygame`. You play a prisoner
and the latest contestant in the Dungeon Mistress's game show. Bring her
the four magic icons hidden around the dungeon, and the exit is unlocked.

On the way you meet a hungry goblin guard, a merchant who wants a certain
record on vinyl, a blacksmith who takes payment in chocolate coins, and
vampire bats that block the way. Dark floors can only be seen through with
a lantern. Some walls are not what they seem. The fog of war lifts only
where you have line of sight.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and plays the sound.

## Playing

The `kara` command opens a 1280x720 window. It loads its resources by
relative path, so run it from a directory that holds them:

| Path                          | What it is                                   |
|-------------------------------|----------------------------------------------|
| `gfx/atlas.png`               | the texture atlas image                      |
| `data/atlas.json`             | names and rectangles of the atlas images     |
| `fonts/EnterCommand.ttf`      | the font                                     |
| `data/map.data`               | the 180x90 tile map, space-separated numbers |
| `data/entities.json`          | the entities placed in the dungeon           |
| `sound/*.ogg`                 | sound effects                                |
| `music/A tricky puzzle_1.ogg` | background music                             |
| `assets/background.jpg`       | title screen background                      |

```
kara
```

The atlas, font, map and entity files are required. If a sound effect,
the music or the title background is missing, a warning is printed and the
game carries on without it.

### Controls

| Key                         | Action                                          |
|-----------------------------|-------------------------------------------------|
| `Space`                     | Leave the title screen                          |
| `W` `A` `S` `D`             | Move                                            |
| `Space` / `Enter`           | Dismiss the current line of dialogue            |
| `Tab`                       | Open the inventory                              |
| `W` / `S` or `Up` / `Down`  | Choose an inventory slot                        |
| `Enter`                     | Drop the selected item and return to the game   |
| `Tab` / `Esc`               | Close the inventory                             |
| `Space` / `Enter` / `Esc`   | Quit from the closing screen                    |

You can carry two items. You cannot drop an item on a cell where something
else already stands. Walking into a character starts a conversation.
Walking into an item, coin, chest, door or sign interacts with it.

Walking onto the stairs ends the game. The closing screen shows the gold
and silver collected against the totals in the dungeon, whether you are
carrying the Eyeball and the Red potion, and how long the run took.

## The package

- `kara.app`: `main()` opens the window and runs the loop. `run()`,
  `step_logic()` and `FpsCounter` drive the frames.
- `kara.title`, `kara.dungeon`, `kara.inventory`, `kara.ending`: the scenes
  (`TitleScene`, `DungeonScene`, `InventoryView`, `Ending`). `create_world()`
  and `Assets` load a fresh dungeon.
- `kara.world`: `World`, the dungeon state, and `AppState`, the current
  scene, keyboard and frame timing.
- `kara.entities`, `kara.factory`: `Entity`, `EntityList`, and
  `create_entity()` / `load_entities()` / `load_entities_file()`, which build
  entities from their JSON records. An unknown `type` raises
  `UnknownEntityError`.
- `kara.player`, `kara.pickups`, `kara.scenery`, `kara.traders`,
  `kara.characters`: the prisoner and every kind of entity in the dungeon.
- `kara.gamemap`, `kara.fog`: `GameMap` (parsing, walkability, the
  fixed-seed tile decoration) and `FogOfWar` (line of sight and light
  levels).
- `kara.atlas`, `kara.textures`, `kara.text`, `kara.draw`, `kara.sound`,
  `kara.input`, `kara.hud`, `kara.messagebox`: resources, drawing, text
  wrapping, sound, keyboard state, the HUD and the dialogue queue.

## What it does not do

- It ships no graphics, font, sound, music, map or entity data. These must
  be supplied in the layout above.
- There is no saving or loading of a game in progress. Quitting ends the run.
- There is one dungeon and no options on the command line beyond `--help`.

## Running the tests

```
pip install ".[test]"
pytest
```