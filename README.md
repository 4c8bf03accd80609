# galconquest

A Galaga-style space shooter built on pygame. Enemies fly in from the top of
the screen and take up positions in a formation of 5 rows by 8 columns. Bosses
fill the top row, challenging enemies the next two rows, and basic enemies the
bottom two rows. About once a second, a randomly chosen enemy in the formation
leaves it and dives at your ship.

A boss that flies into you captures your fighter. The captured ship rises off
the top of the screen and costs a life. Shoot the boss before the ship is gone
and you get the ship back as a dual fighter that fires alongside you.

Every third stage is a challenging stage. It has a wave of 20 challenging
enemies and ends after 30 seconds or when all of them are gone.

## Installing

```
pip install galconquest
```

To install the test dependencies as well:

```
pip install "galconquest[test]"
```

## Playing

```
galconquest
```

The game opens an 800×600 window. It loads its images from `assets/`,
relative to the current working directory:

- `background.png`
- `player.png`
- `enemy.png`
- `boss_enemy.png`
- `challenge_enemy.png`
- `bullet.png`

To load them from somewhere else, give the directory that contains `assets/`:

```
galconquest --assets-root /path/to/game-data
```

When an image cannot be loaded, the game uses a 1×1 white placeholder surface
in its place. For text, the game tries a few common system locations of Arial
and Helvetica, then `assets/fonts/arial.ttf`. If none of these loads, it uses
pygame's built-in font.

### Controls

| Key                 | Action                                          |
|---------------------|-------------------------------------------------|
| Up / Down           | Move through menu entries                       |
| Enter / Space       | Choose a menu entry                             |
| Left / Right        | Change a setting on the menu's settings page    |
| A / Left, D / Right | Move the ship                                   |
| Space               | Fire (at most one shot every 0.25 seconds)      |
| Enter               | Go back to the menu after a game over           |

The title menu has three entries: **Play Game**, **Settings** and **Exit**.
The settings page shows music volume, sound volume (each 0–100 % in steps of
10) and fullscreen on or off, and has a **Back** entry. Changing a value
moves the cursor back to the first line.

### Scoring

| Target                                  | Points |
|-----------------------------------------|--------|
| Basic enemy                             | 100    |
| Challenging enemy                       | 300    |
| Boss                                    | 500    |
| Boss holding a captured ship            | 1000   |
| Bonus for shooting a boss holding a ship| 1000   |

You start with three lives. While you have a dual fighter, the next hit costs
the dual fighter and not a life. The high score is kept for as long as the
program runs.

## Using the pieces

You can drive the game from your own code through `galconquest.game.Game`:

- `Game(surface=None, textures=None, rng=None, clock=None)`: draws on
  `surface`, or opens a window when none is given. `rng` is a
  `random.Random` and `clock` returns seconds, so tests can make runs
  repeatable.
- `run()`: runs the event, update and draw loop at 60 frames per second.
- `handle_event(event)`: feeds it one pygame event.
- `update(pressed)`: advances it one frame for a keyboard state such as
  `pygame.key.get_pressed()`.
- `render()`: draws the current frame.
- `new_game()`: starts over at stage 1 with a fresh ship and a score of 0.
- `show_preferences()`: opens the settings dialog, which Up/Down, Left/Right,
  Enter and Escape then control.
- `show_about_panel()`: shows the about text until the next key press.
- `apply_settings()`: switches the window it opened itself to fullscreen or
  800×600, following the dialog, and restarts at stage 1.

The sprites and screens are in their own modules:

- `galconquest.player.Player`
- `galconquest.enemy.Enemy` and `EnemyType`
- `galconquest.bullet.Bullet`
- `galconquest.menu.Menu` and `MenuState`
- `galconquest.settings.Settings`
- `galconquest.textures.TextureManager`, which caches images and fonts and
  resolves file names against an optional `root`

## What it does not do

- There is no sound. The music and sound volumes are stored but nothing uses
  them.
- The fullscreen choice on the menu's settings page changes nothing.
  Fullscreen follows only the settings dialog, and only when your code calls
  `Game.apply_settings()`.
- No key opens the settings dialog or the about text. Only
  `Game.show_preferences()` and `Game.show_about_panel()` open them.
- Nothing is saved between runs, high score included.
- Choosing **Play Game** does not reset the ship, score or stage. After a game
  over, a new game from the menu ends at once. Call `Game.new_game()` to start
  again with a fresh ship.