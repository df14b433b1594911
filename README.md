# eterium

A small top-down role-playing adventure. You play a knight in a village.
A wizard there tells you that the Eterium, the stone that keeps the world
at peace, has been broken into fragments. Once he has finished talking he
offers to take you to a second world, the sacred land he protects, where
he goes on with the story.

## Installing

```
pip install .
```

The game needs `pygame`, which is installed along with the package.

## Playing

```
eterium --assets path/to/assets
```

`--assets` names the directory that holds the map and sprite images. If it
is not given, the `ETERIUM_ASSETS` environment variable is used, and failing
that the current directory. The command stops with an error if the
directory does not exist.

The images looked for there are `map1.png`, `Scene Overview2.png`,
`Knight-Walk.png`, `Knight-Idle.png`, `Wizard-Idle.png`, `Slime-Walk.png`
and `Armored Axeman-Idle.png`. Sprite sheets are rows of 100×100 frames.
An image that cannot be loaded is reported through the log and simply not
drawn; the game goes on without it.

### Main menu

- Enter: start the loading bar. When it is full the game window opens;
  when the game is closed you are back in the menu.
- Escape: quit.

### In the game

- Arrow keys: walk the knight up, down, left or right. Releasing the key
  stops him and plays his idle animation.
- Space: during a conversation, show the whole line at once, or go on to
  the next line once it has been shown. Other keys are ignored while a
  conversation is on screen.
- Escape: close the game window and go back to the menu.

Walk up to the wizard to start talking to him. A slime wanders around the
village, bouncing off walls; bump into it and a message pops up and the
slime is gone. At the end of the wizard's talk a question asks whether you
want to go to another world (S, Y or Enter for yes; N or Escape for no).
Saying yes takes you to the sacred land, where the wizard speaks again and
an armoured axeman stands guard. Saying no leaves you in the village with
the slime moving again.

## What the game does not do

There is no combat, no inventory, no saving and no further quests: the
slime encounter only removes the slime, and the axeman only plays his idle
animation. The story stops after the second conversation.

## Using it as a library

The game logic does not depend on a window, so it can be driven from code:

- `eterium.sprites`: `Rect` (with `intersects` and `translated`),
  `Animation` (a frame cycle with `advance`, `reset` and `frame_box`) and
  `Actor` (a positioned sprite with `bounds`, `move_by` and `distance_to`).
- `eterium.dialogue`: the two conversation scripts, `WIZARD_DIALOGUE` and
  `SACRED_LAND_DIALOGUE`, and `Typewriter`, which reveals lines one letter
  per `tick`, with `skip` and `advance`.
- `eterium.worlds`: `village()` and `sacred_land()` return a `WorldLayout`
  holding each map's image name, blocking rectangles, start positions,
  walking speed and scales.
- `eterium.menu`: `LoadingBar`, the menu's simulated loading progress,
  with `start`, `tick` and `elapse`.
- `eterium.game`: `Game`, with `Key`, `Direction` and `Timer`. Call
  `Game.press`, `Game.release` and `Game.tick(ms)` to play without a
  window; pass `confirm` to answer the travel question and `notify` to be
  told about pop-up messages, which are also kept in `Game.messages`.
- `eterium.app`: the pygame front end, with `main`, `key_from_pygame`
  and `asset_path`.

```python
from eterium.game import Game, Key

game = Game(confirm=lambda title, question: True)
game.press(Key.DOWN)
game.tick(1000)          # ten walking steps at 100 ms each
game.release(Key.DOWN)
print(game.player.position)
```

## Running the tests

```
pip install .[test]
pytest
```