from eterium.dialogue import SACRED_LAND_DIALOGUE, WIZARD_DIALOGUE, Typewriter


def _reveal(writer):
    ticks = 0
    while writer.tick():
        ticks += 1
    return ticks


def _walk_to_last_line(writer):
    while True:
        writer.skip()
        last = writer.current_line
        if not writer.advance():
            return last


def test_wizard_script_opens_and_closes():
    writer = Typewriter(WIZARD_DIALOGUE)
    writer.skip()
    assert writer.text == "Mago: Hola caballero C++."
    assert _walk_to_last_line(writer) == "Caballero: Está bien, salvaré al mundo."


def test_sacred_land_script_opens_and_closes():
    writer = Typewriter(SACRED_LAND_DIALOGUE)
    writer.skip()
    assert writer.text == (
        "Caballero: ESPERA... Como hiciste eso? donde estamos? como lograste hacer eso? "
    )
    assert _walk_to_last_line(writer) == (
        "Caballero: Ok, ayudaré a Steve Latin a recuperar a su hermano."
    )


def test_ticks_reveal_one_letter_each():
    writer = Typewriter(["abc", "de"])
    writer.tick()
    assert writer.text == "a"
    writer.tick()
    assert writer.text == "ab"


def test_full_reveal_matches_line_and_stops():
    writer = Typewriter(WIZARD_DIALOGUE)
    _reveal(writer)
    assert writer.text == WIZARD_DIALOGUE[0]
    assert writer.running is False
    assert writer.letter_index == len(WIZARD_DIALOGUE[0])


def test_tick_after_stop_changes_nothing():
    writer = Typewriter(["hi"])
    _reveal(writer)
    assert writer.tick() is False
    assert writer.text == "hi"


def test_skip_shows_whole_line():
    writer = Typewriter(SACRED_LAND_DIALOGUE)
    writer.tick()
    writer.skip()
    assert writer.text == SACRED_LAND_DIALOGUE[0]
    assert writer.running is False


def test_advance_clears_text_and_restarts():
    writer = Typewriter(["first", "second"])
    writer.skip()
    assert writer.advance() is True
    assert writer.text == ""
    assert writer.running is True
    assert writer.current_line == "second"
    _reveal(writer)
    assert writer.text == "second"


def test_advance_past_last_line_finishes():
    writer = Typewriter(["only"])
    _reveal(writer)
    assert writer.advance() is False
    assert writer.finished
    assert writer.current_line is None
    assert writer.tick() is False


def test_whole_script_walks_every_line():
    writer = Typewriter(WIZARD_DIALOGUE)
    shown = []
    while True:
        _reveal(writer)
        shown.append(writer.text)
        if not writer.advance():
            break
    assert tuple(shown) == WIZARD_DIALOGUE


def test_empty_script_is_finished():
    writer = Typewriter([])
    assert writer.finished
    assert writer.tick() is False
    assert writer.running is False