"""Conversation scripts and a letter-by-letter text reveal."""

from __future__ import annotations

from collections.abc import Iterable

WIZARD_DIALOGUE: tuple[str, ...] = (
    "Mago: Hola caballero C++.",
    "Caballero: ¿Quién eres tú?",
    "Mago: Yo soy un mago y debo decirte algo muy importante y todo depende de que tú me ayudes.",
    "Caballero: Hmm... ¿y por qué yo? ¿Qué debo hacer?",
    "Mago: El mundo está en peligro y debemos salvarlo. En esta tierra hay una piedra llamada Éterium. "
    "El jefe, que es un villano, destruyó la piedra en varios fragmentos. "
    "Tú debes restaurar la paz del mundo y vencer al jefe.",
    "Caballero: Pero no puedo hacerlo. No se como salvar al mundo. :(",
    " Mago: No te preocupes cuando te toque enfrentarte a un enemigo mis amigas curandera y "
    "princesa C# te van ayudar No tengas miedo, al trabajar todos juntos podemos salvar el mundo.",
    "Caballero: Está bien, salvaré al mundo.",
)

SACRED_LAND_DIALOGUE: tuple[str, ...] = (
    "Caballero: ESPERA... Como hiciste eso? donde estamos? como lograste hacer eso? ",
    "Brujo: Tranquilo, no olvides que soy mago y puedo hacer magia. ",
    "Brujo:  Y esta es una tierra sagrada y yo soy el protector de esta tierra. ",
    "Brujo: Pero al perder el Éterium, esta tierra sagrada quedó dañada.",
    "Caballero: Eso estoy viendo... Veo que el Éterium sí es importante.",
    "Brujo: Sí lo es. Porque el Éterium mantiene la paz de todo, y todos corremos peligro.",
    "Caballero: Y dime... ¿qué puedo hacer? No quiero que mi hogar quede destruido.",
    "Brujo: Deberás pasar por muchos desafíos, y en el camino harás amigos que te ayudarán.",
    "Brujo: Debes unir todos los fragmentos del eterium para asi poder restaurar la paz",
    "Caballero:  Pero yo no puedo solo.",
    "Brujo: Que no se olvide que ya te habia dicho que mis amigas te van ayudar",
    "Caballero: ahhhhhh..Ok, es cierto se me habia olvidado, ahora dime... ¿qué puedo hacer?",
    "Brujo: Primero debes ayudar a Steve Latin. Los ogros del jefe secuestraron a su hermano,",
    "Brujo: El se encuentra cerca de esta tierra debes encontrar y debes ayudarlo.",
    "Caballero: Que paso con su hermano?",
    "Brujo: Creo que el hermano de steve latin logro robarle un fragmento del eterium pero los ogros,",
    "Brujo: lo tienen capturado.",
    "Caballero: Ok, ayudaré a Steve Latin a recuperar a su hermano.",
)


class Typewriter:
    """Reveals a sequence of lines one character per tick.

    ``text`` is what is currently on screen; ``running`` tells whether the
    reveal is still in progress for the current line.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self.lines: tuple[str, ...] = tuple(lines)
        self.line_index = 0
        self.letter_index = 0
        self.text = ""
        self.running = True
        self._partial = ""

    @property
    def finished(self) -> bool:
        """True once every line has been advanced past."""
        return self.line_index >= len(self.lines)

    @property
    def current_line(self) -> str | None:
        return None if self.finished else self.lines[self.line_index]

    def tick(self) -> bool:
        """Reveal one more character; return whether the reveal goes on."""
        if not self.running:
            return False
        if self.finished:
            self.running = False
            return False
        line = self.lines[self.line_index]
        if self.letter_index < len(line):
            self._partial += line[self.letter_index]
            self.text = self._partial
            self.letter_index += 1
        else:
            self.running = False
        return self.running

    def skip(self) -> None:
        """Stop the reveal and show the whole current line at once."""
        self.running = False
        if not self.finished:
            self.text = self.lines[self.line_index]

    def advance(self) -> bool:
        """Move to the next line; return False when there is none left."""
        self.line_index += 1
        if self.finished:
            self.running = False
            return False
        self.letter_index = 0
        self._partial = ""
        self.text = ""
        self.running = True
        return True