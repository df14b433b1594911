"""Game state without any drawing: actors, timers, keyboard input and dialogue flow."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from eterium.dialogue import SACRED_LAND_DIALOGUE, WIZARD_DIALOGUE, Typewriter
from eterium.sprites import Actor, Animation, Rect
from eterium.worlds import WorldLayout, sacred_land, village

KNIGHT_WALK = "Knight-Walk"
KNIGHT_IDLE = "Knight-Idle"
WIZARD_IDLE = "Wizard-Idle"
SLIME_WALK = "Slime-Walk"
AXEMAN_IDLE = "Armored Axeman-Idle"

WALK_FRAMES = 8
IDLE_FRAMES = 4
WIZARD_IDLE_FRAMES = 6
SLIME_FRAMES = 6
AXEMAN_IDLE_FRAMES = 6

MOVE_INTERVAL = 100
IDLE_INTERVAL = 250
WIZARD_IDLE_INTERVAL = 250
SLIME_INTERVAL = 270
SLIME_RESUME_INTERVAL = 150
AXEMAN_IDLE_INTERVAL = 250
FIRST_LETTER_INTERVAL = 30
LETTER_INTERVAL = 40

WIZARD_TALK_DISTANCE = 30.0
SLIME_HIT_DISTANCE = 20.0
LABEL_DISTANCE = 50.0

# Opaque part of a 100x100 sprite frame; only this area takes part in collisions.
DEFAULT_HITBOX = Rect(40, 40, 20, 20)

ENEMY_TITLE = "¡Enemigo!"
ENEMY_TEXT = "Oh no, te has topado con una babosa enemiga!"
TRAVEL_TITLE = "Mago"
TRAVEL_QUESTION = "¿Deseas ir a otro mundo?"


class Direction(enum.Enum):
    """Where the knight is walking."""

    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ESCAPE = "escape"


_ARROWS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Timer:
    """A repeating timer driven by explicitly elapsed milliseconds."""

    def __init__(self, callback: Callable[[], object] | None = None, interval: int | None = None) -> None:
        self.callback = callback
        self.interval = interval
        self.active = False
        self.elapsed = 0

    @property
    def remaining(self) -> int:
        """Milliseconds left until the next firing."""
        if self.interval is None:
            raise RuntimeError("timer has no interval")
        return self.interval - self.elapsed

    def start(self, interval: int | None = None) -> None:
        """(Re)start counting from zero, optionally with a new interval."""
        if interval is not None:
            self.interval = interval
        if self.interval is None or self.interval <= 0:
            raise ValueError("a timer interval must be a positive number of milliseconds")
        self.elapsed = 0
        self.active = True

    def stop(self) -> None:
        """Stop the timer; it fires no more until started again."""
        self.active = False
        self.elapsed = 0

    def elapse(self, ms: int) -> int:
        """Let ``ms`` milliseconds pass and return how many times it fired."""
        if ms < 0:
            raise ValueError("elapsed time cannot be negative")
        if not self.active:
            return 0
        self.elapsed += ms
        fired = 0
        while self.active and self.elapsed >= self.interval:
            self.elapsed -= self.interval
            fired += 1
            self._call()
        return fired

    def _wait(self, ms: int) -> None:
        self.elapsed += ms

    def _fire(self) -> None:
        self.elapsed = 0
        self._call()

    def _call(self) -> None:
        if self.callback is not None:
            self.callback()


@dataclass
class _Label:
    text: str
    x: float
    y: float
    visible: bool = False


class Game:
    """The running game: the knight, the other characters and the dialogues.

    ``confirm(title, question)`` answers yes/no questions (no answer means
    "no"); ``notify(title, text)`` is told about pop-up messages, which are
    also kept in ``messages``. ``poses`` maps each actor to the sheet and
    frame it currently shows.
    """

    def __init__(
        self,
        layout: WorldLayout | None = None,
        *,
        confirm: Callable[[str, str], bool] | None = None,
        notify: Callable[[str, str], None] | None = None,
        hitbox: Rect = DEFAULT_HITBOX,
    ) -> None:
        self.layout = layout if layout is not None else village()
        self.confirm = confirm
        self.notify = notify
        self.hitbox = hitbox
        self.messages: list[tuple[str, str]] = []
        self.closed = False
        self.world_changed = False
        self.player_speed = self.layout.player_speed
        self.direction = Direction.NONE
        self.camera: tuple[float, float] | None = None
        self.poses: dict[str, tuple[str, int]] = {}

        self.walk = Animation(WALK_FRAMES)
        self.idle = Animation(IDLE_FRAMES)

        self.move_timer = Timer(self.update_movement)
        self.idle_timer = Timer(self.update_idle)
        self.wizard_idle_timer = Timer(self.update_wizard_idle)
        self.slime_timer = Timer(self.update_slime)
        self.text_timer = Timer(self.update_text)
        self.axeman_idle_timer = Timer(self.update_axeman_idle)

        self.dialogue: Typewriter | None = None
        self.dialogue_active = False

        scale = self.layout.sprite_scale
        self.player: Actor | None = Actor("player", *self.layout.player_start, scale=scale)
        self.poses["player"] = (KNIGHT_IDLE, 0)

        self.blockers: list[Rect | Actor] = list(self.layout.blockers)

        self.wizard: Actor | None = Actor(
            "wizard", *self.layout.wizard_start, scale=scale, animation=Animation(WIZARD_IDLE_FRAMES)
        )
        self.poses["wizard"] = (WIZARD_IDLE, 0)
        self.blockers.append(self.wizard)
        self.wizard_idle_timer.start(WIZARD_IDLE_INTERVAL)

        self.slime: Actor | None = None
        self.slime_dx = 1.0
        self.slime_dy = 1.0
        if self.layout.slime_start is not None:
            self.slime = Actor("slime", *self.layout.slime_start, scale=scale, animation=Animation(SLIME_FRAMES))
            self.poses["slime"] = (SLIME_WALK, 0)
            self.slime_timer.start(SLIME_INTERVAL)

        self.axeman: Actor | None = None
        if self.layout.axeman_start is not None:
            self._spawn_axeman(self.layout.axeman_start, scale)

        self.mago_label: _Label | None = _Label("Mago", self.wizard.x + 20, self.wizard.y - 20)
        self.slime_label: _Label | None = None
        if self.slime is not None:
            self.slime_label = _Label("Slime", self.slime.x + 20, self.slime.y - 20)

    # ------------------------------------------------------------------ input

    def press(self, key: Key, auto_repeat: bool = False) -> None:
        """Handle a key being pressed."""
        if self.dialogue_active:
            if key is Key.SPACE:
                self._on_space()
            return

        if self.player is None or auto_repeat:
            return

        if self.idle_timer.active:
            self.idle_timer.stop()
            self.idle.reset()

        direction = _ARROWS.get(key)
        if direction is not None:
            self.direction = direction
            if not self.move_timer.active:
                self.move_timer.start(MOVE_INTERVAL)
        elif key is Key.ESCAPE:
            self.closed = True

    def release(self, key: Key, auto_repeat: bool = False) -> None:
        """Handle a key being released."""
        if auto_repeat or key not in _ARROWS:
            return
        self.direction = Direction.NONE
        self.move_timer.stop()
        self.idle.reset()
        self.idle_timer.start(IDLE_INTERVAL)

    def _on_space(self) -> None:
        if self.dialogue is None:
            self.dialogue_active = False
            return
        if self.text_timer.active:
            self.text_timer.stop()
            self.dialogue.skip()
        elif self.dialogue.advance():
            self.text_timer.start(LETTER_INTERVAL)
        else:
            self._close_dialogue()
            if not self.world_changed:
                self._offer_travel()

    def _offer_travel(self) -> None:
        accepted = bool(self.confirm(TRAVEL_TITLE, TRAVEL_QUESTION)) if self.confirm else False
        if accepted:
            self.change_world()
        elif not self.slime_timer.active:
            self.slime_timer.start(SLIME_RESUME_INTERVAL)

    def _start_dialogue(self, lines: tuple[str, ...], interval: int) -> None:
        self.dialogue = Typewriter(lines)
        self.dialogue_active = True
        self.text_timer.start(interval)

    def _close_dialogue(self) -> None:
        self.text_timer.stop()
        self.dialogue = None
        self.dialogue_active = False

    # -------------------------------------------------------------- collisions

    def _hitbox_of(self, actor: Actor) -> Rect:
        s = actor.scale
        return Rect(
            actor.x + self.hitbox.x * s,
            actor.y + self.hitbox.y * s,
            self.hitbox.width * s,
            self.hitbox.height * s,
        )

    def collides(self, actor: Actor | None, dx: float, dy: float) -> bool:
        """Whether moving ``actor`` by (dx, dy) would overlap a blocker."""
        if actor is None:
            return False
        moved = self._hitbox_of(actor).translated(dx, dy)
        for blocker in self.blockers:
            if blocker is actor:
                continue
            area = blocker if isinstance(blocker, Rect) else self._hitbox_of(blocker)
            if moved.intersects(area):
                return True
        return False

    # ------------------------------------------------------------ timer slots

    def update_movement(self) -> None:
        """Walk one step in the current direction and refresh the labels."""
        if self.player is None or self.direction is Direction.NONE:
            return
        ux, uy = _STEPS[self.direction]
        dx, dy = ux * self.player_speed, uy * self.player_speed

        if not self.collides(self.player, dx, dy):
            self.player.move_by(dx, dy)
            self.check_wizard_interaction()
            self.check_slime_interaction()
            self.camera = self.player.position

        self.poses["player"] = (KNIGHT_WALK, self.walk.advance())

        self._refresh_label(self.mago_label, self.wizard)
        self._refresh_label(self.slime_label, self.slime)

    def _refresh_label(self, label: _Label | None, actor: Actor | None) -> None:
        if label is None or actor is None or self.player is None:
            return
        if self.player.distance_to(actor) < LABEL_DISTANCE:
            label.visible = True
            label.x = actor.x + 20
            label.y = actor.y - 20
        else:
            label.visible = False

    def update_idle(self) -> None:
        """Show the knight's next idle frame."""
        if self.player is None:
            return
        self.poses["player"] = (KNIGHT_IDLE, self.idle.index)
        self.idle.advance()

    def update_slime(self) -> None:
        """Move the slime diagonally, bouncing off blockers."""
        if self.slime is None:
            return
        if self.collides(self.slime, self.slime_dx, 0):
            self.slime_dx = -self.slime_dx
        else:
            self.slime.move_by(self.slime_dx, 0)
        if self.collides(self.slime, 0, self.slime_dy):
            self.slime_dy = -self.slime_dy
        else:
            self.slime.move_by(0, self.slime_dy)
        self._show_next(self.slime, SLIME_WALK)

    def update_wizard_idle(self) -> None:
        """Show the wizard's next idle frame."""
        if self.wizard is not None:
            self._show_next(self.wizard, WIZARD_IDLE)

    def update_axeman_idle(self) -> None:
        """Show the axeman's next idle frame."""
        if self.axeman is not None:
            self._show_next(self.axeman, AXEMAN_IDLE)

    def _show_next(self, actor: Actor, sheet: str) -> None:
        if actor.animation is None:
            return
        self.poses[actor.name] = (sheet, actor.animation.index)
        actor.animation.advance()

    def update_text(self) -> None:
        """Reveal one more letter of the current dialogue line."""
        if self.dialogue is None or not self.dialogue.tick():
            self.text_timer.stop()

    # ------------------------------------------------------------ encounters

    def check_wizard_interaction(self) -> None:
        """Start the wizard's conversation when the knight comes close."""
        if self.player is None or self.wizard is None:
            return
        if self.world_changed or self.dialogue_active:
            return
        if self.player.distance_to(self.wizard) < WIZARD_TALK_DISTANCE:
            self.slime_timer.stop()
            self.move_timer.stop()
            self._start_dialogue(WIZARD_DIALOGUE, FIRST_LETTER_INTERVAL)

    def check_slime_interaction(self) -> None:
        """Remove the slime and halt the knight when they bump into each other."""
        if self.player is None or self.slime is None:
            return
        if self.player.distance_to(self.slime) >= SLIME_HIT_DISTANCE:
            return
        self.slime_timer.stop()
        self.move_timer.stop()
        self._post(ENEMY_TITLE, ENEMY_TEXT)
        self.slime_label = None
        self.poses.pop(self.slime.name, None)
        self.slime = None
        self.direction = Direction.NONE
        self.idle.reset()
        self.idle_timer.start(IDLE_INTERVAL)

    def _post(self, title: str, text: str) -> None:
        self.messages.append((title, text))
        if self.notify is not None:
            self.notify(title, text)

    def _spawn_axeman(self, position: tuple[float, float], scale: float) -> None:
        self.axeman = Actor("axeman", *position, scale=scale, animation=Animation(AXEMAN_IDLE_FRAMES))
        self.poses["axeman"] = (AXEMAN_IDLE, 0)
        self.blockers.append(self.axeman)
        self.axeman_idle_timer.start(AXEMAN_IDLE_INTERVAL)

    def change_world(self) -> None:
        """Teleport the knight and the wizard to the sacred land."""
        self.mago_label = None
        self.slime_label = None
        self.slime_timer.stop()
        self.slime = None
        self.blockers = []
        self.poses = {}

        layout = sacred_land()
        self.layout = layout
        scale = layout.sprite_scale

        self.player = Actor("player", *layout.player_start, scale=scale)
        self.poses["player"] = (KNIGHT_IDLE, 0)
        self.camera = self.player.position

        animation = self.wizard.animation if self.wizard is not None else Animation(WIZARD_IDLE_FRAMES)
        self.wizard = Actor("wizard", *layout.wizard_start, scale=scale, animation=animation)
        self.poses["wizard"] = (WIZARD_IDLE, 0)
        self.blockers.append(self.wizard)

        if layout.axeman_start is not None:
            self._spawn_axeman(layout.axeman_start, scale)

        self.blockers.extend(layout.blockers)

        self.direction = Direction.NONE
        self.move_timer.stop()
        self.player_speed = layout.player_speed

        self._start_dialogue(SACRED_LAND_DIALOGUE, LETTER_INTERVAL)
        self.world_changed = True

    # ---------------------------------------------------------------- clock

    @property
    def _timers(self) -> tuple[Timer, ...]:
        return (
            self.move_timer,
            self.idle_timer,
            self.wizard_idle_timer,
            self.slime_timer,
            self.text_timer,
            self.axeman_idle_timer,
        )

    def tick(self, ms: int) -> int:
        """Let ``ms`` milliseconds pass, firing timers in time order; return the firings."""
        if ms < 0:
            raise ValueError("elapsed time cannot be negative")
        remaining = ms
        fired = 0
        while True:
            active = [timer for timer in self._timers if timer.active]
            if not active:
                break
            due = min(active, key=lambda timer: timer.remaining)
            wait = due.remaining
            if wait > remaining:
                for timer in active:
                    timer._wait(remaining)
                break
            for timer in active:
                timer._wait(wait)
            remaining -= wait
            due._fire()
            fired += 1
        return fired