import pytest

from eterium.dialogue import SACRED_LAND_DIALOGUE, WIZARD_DIALOGUE
from eterium.game import (
    ENEMY_TEXT,
    ENEMY_TITLE,
    FIRST_LETTER_INTERVAL,
    IDLE_FRAMES,
    KNIGHT_IDLE,
    KNIGHT_WALK,
    LETTER_INTERVAL,
    MOVE_INTERVAL,
    SLIME_INTERVAL,
    SLIME_RESUME_INTERVAL,
    TRAVEL_QUESTION,
    TRAVEL_TITLE,
    Direction,
    Game,
    Key,
    Timer,
)
from eterium.sprites import Rect
from eterium.worlds import WorldLayout, sacred_land, village


def _layout(blockers=(), wizard=(1000.0, 1000.0), slime=None, player=(0.0, 0.0)):
    return WorldLayout(
        name="test",
        map_image="test.png",
        blockers=tuple(blockers),
        player_start=player,
        wizard_start=wizard,
        player_speed=5,
        slime_start=slime,
    )


def _finish_dialogue(game):
    while game.dialogue_active:
        game.press(Key.SPACE)


def test_timer_fires_per_interval():
    calls = []
    timer = Timer(lambda: calls.append(True))
    timer.start(MOVE_INTERVAL)
    fired = timer.elapse(MOVE_INTERVAL * 2)
    assert fired == len(calls)
    assert fired == 2


def test_timer_stopped_does_not_fire():
    calls = []
    timer = Timer(lambda: calls.append(True))
    timer.start(MOVE_INTERVAL)
    timer.stop()
    assert timer.elapse(MOVE_INTERVAL * 3) == 0
    assert calls == []


def test_timer_rejects_bad_interval():
    with pytest.raises(ValueError):
        Timer().start(0)


def test_tick_rejects_negative_time():
    with pytest.raises(ValueError):
        Game(_layout()).tick(-1)


def test_initial_state_follows_village_layout():
    game = Game()
    layout = village()
    assert game.player.position == layout.player_start
    assert game.wizard.position == layout.wizard_start
    assert game.wizard in game.blockers
    assert game.player_speed == layout.player_speed
    assert game.direction is Direction.NONE
    assert game.poses["player"] == (KNIGHT_IDLE, 0)
    assert game.slime_timer.active


def test_walking_right_moves_by_speed():
    game = Game(_layout())
    game.press(Key.RIGHT)
    assert game.move_timer.active
    game.tick(MOVE_INTERVAL)
    assert game.player.position == (game.player_speed, 0)
    assert game.camera == game.player.position
    assert game.poses["player"][0] == KNIGHT_WALK


def test_release_goes_idle():
    game = Game(_layout())
    game.press(Key.DOWN)
    game.release(Key.DOWN)
    assert not game.move_timer.active
    assert game.idle_timer.active
    assert game.direction is Direction.NONE


def test_auto_repeat_press_is_ignored():
    game = Game(_layout())
    game.press(Key.LEFT, auto_repeat=True)
    assert not game.move_timer.active
    assert game.direction is Direction.NONE


def test_escape_closes_game():
    game = Game(_layout())
    game.press(Key.ESCAPE)
    assert game.closed


def test_collision_with_blocker():
    game = Game(_layout(blockers=[Rect(300, 0, 10, 10)]))
    game.player.x, game.player.y = 240, -40
    assert not game.collides(game.player, 0, 0)
    assert game.collides(game.player, 1, 0)
    game.press(Key.RIGHT)
    game.tick(MOVE_INTERVAL)
    assert game.player.x == 240


def test_collides_with_no_actor_is_false():
    game = Game(_layout(blockers=[Rect(0, 0, 1000, 1000)]))
    assert game.collides(None, 0, 0) is False


def test_wizard_dialogue_reveals_letters():
    game = Game(_layout(wizard=(25.0, 0.0)))
    game.check_wizard_interaction()
    assert game.dialogue_active
    assert game.dialogue.lines == WIZARD_DIALOGUE
    game.tick(FIRST_LETTER_INTERVAL * 3)
    assert game.dialogue.text == WIZARD_DIALOGUE[0][:3]


def test_space_skips_then_advances():
    game = Game(_layout(wizard=(25.0, 0.0)))
    game.check_wizard_interaction()
    game.press(Key.SPACE)
    assert game.dialogue.text == WIZARD_DIALOGUE[0]
    assert not game.text_timer.active
    game.press(Key.SPACE)
    assert game.dialogue.text == ""
    assert game.text_timer.interval == LETTER_INTERVAL
    game.tick(LETTER_INTERVAL)
    assert game.dialogue.text == WIZARD_DIALOGUE[1][:1]


def test_arrows_ignored_during_dialogue():
    game = Game(_layout(wizard=(25.0, 0.0)))
    game.check_wizard_interaction()
    game.press(Key.RIGHT)
    assert not game.move_timer.active


def test_declining_travel_resumes_slime():
    questions = []

    def confirm(title, text):
        questions.append((title, text))
        return False

    game = Game(_layout(wizard=(25.0, 0.0), slime=(500.0, 500.0)), confirm=confirm)
    game.check_wizard_interaction()
    assert not game.slime_timer.active
    _finish_dialogue(game)
    assert questions == [(TRAVEL_TITLE, TRAVEL_QUESTION)]
    assert not game.world_changed
    assert game.slime_timer.active
    assert game.slime_timer.interval == SLIME_RESUME_INTERVAL


def test_accepting_travel_changes_world():
    questions = []

    def confirm(title, text):
        questions.append(title)
        return True

    game = Game(_layout(wizard=(25.0, 0.0), slime=(500.0, 500.0)), confirm=confirm)
    game.check_wizard_interaction()
    _finish_dialogue(game)
    land = sacred_land()
    assert game.world_changed
    assert game.player.position == land.player_start
    assert game.player.scale == land.sprite_scale
    assert game.player_speed == land.player_speed
    assert game.slime is None
    assert game.axeman.position == land.axeman_start
    assert len(game.blockers) == len(land.blockers) + 2
    assert game.dialogue.lines == SACRED_LAND_DIALOGUE
    _finish_dialogue(game)
    assert not game.dialogue_active
    assert len(questions) == 1


def test_slime_encounter_removes_slime():
    notices = []
    game = Game(_layout(slime=(300.0, 300.0)), notify=lambda t, m: notices.append((t, m)))
    game.player.x, game.player.y = 300.0, 300.0
    game.check_slime_interaction()
    assert game.slime is None
    assert game.slime_label is None
    assert game.messages == [(ENEMY_TITLE, ENEMY_TEXT)]
    assert notices == game.messages
    assert game.idle_timer.active
    assert game.direction is Direction.NONE


def test_slime_bounces_off_blocker():
    game = Game(_layout(blockers=[Rect(60, 40, 5, 20)], slime=(0.0, 0.0), player=(500.0, 500.0)))
    start_dx, start_dy = game.slime_dx, game.slime_dy
    game.update_slime()
    assert game.slime_dx == -start_dx
    assert game.slime.x == 0
    assert game.slime.y == start_dy


def test_slime_moves_on_its_timer():
    game = Game()
    start = game.slime.position
    dx, dy = game.slime_dx, game.slime_dy
    game.tick(SLIME_INTERVAL)
    assert game.slime.position == (start[0] + dx, start[1] + dy)


def test_mago_label_shows_near_wizard():
    game = Game(_layout(wizard=(100.0, 0.0), player=(55.0, 0.0)))
    game.press(Key.RIGHT)
    game.tick(MOVE_INTERVAL)
    label = game.mago_label
    assert label.visible
    assert (label.x, label.y) == (game.wizard.x + 20, game.wizard.y - 20)
    assert not game.dialogue_active
    game.player.x = -500.0
    game.tick(MOVE_INTERVAL)
    assert not game.mago_label.visible


def test_idle_frames_wrap():
    game = Game(_layout())
    frames = []
    for _ in range(IDLE_FRAMES + 1):
        game.update_idle()
        frames.append(game.poses["player"][1])
    assert frames == list(range(IDLE_FRAMES)) + [0]
    assert all(game.poses["player"][0] == KNIGHT_IDLE for _ in frames)