"""Static layouts of the two maps: spawn points, speeds and collision boxes."""

from __future__ import annotations

from dataclasses import dataclass

from eterium.sprites import Rect

Point = tuple[float, float]


@dataclass(frozen=True)
class WorldLayout:
    """Everything that is fixed about one map before play begins."""

    name: str
    map_image: str
    blockers: tuple[Rect, ...]
    player_start: Point
    wizard_start: Point
    player_speed: int
    sprite_scale: float = 1.0
    view_scale: float = 1.0
    view_size: tuple[int, int] | None = None
    slime_start: Point | None = None
    axeman_start: Point | None = None


def _rects(*boxes: tuple[float, float, float, float]) -> tuple[Rect, ...]:
    return tuple(Rect(*box) for box in boxes)


_VILLAGE_BLOCKERS = _rects(
    (1, 1, 334, 127),
    (70, 200, 29, 29),
    (44, 136, 44, 10),
    (29, 156, 23, 22),
    (24, 180, 10, 75),
    (9, 265, 11, 48),
    (26, 316, 11, 49),
    (43, 348, 11, 50),
    (55, 396, 30, 50),
    (85, 412, 17, 38),
    (52, 450, 17, 19),
    (35, 478, 17, 19),
    (17, 497, 17, 16),
    (8, 518, 11, 72),
    (21, 586, 16, 16),
    (46, 600, 25, 16),
    (74, 615, 60, 16),
    (133, 631, 95, 14),
    (225, 613, 26, 14),
    (242, 598, 26, 14),
    (255, 569, 26, 23),
    (275, 550, 26, 23),
    (290, 519, 26, 23),
    (306, 483, 26, 31),
    (320, 316, 8, 184),
    (301, 189, 8, 136),
    (286, 199, 8, 18),
    (270, 179, 16, 17),
    (240, 163, 23, 17),
    (208, 134, 24, 30),
    (273, 364, 16, 22),
    (137, 281, 40, 71),
    (164, 284, 16, 68),
    (184, 305, 16, 47),
    (193, 315, 20, 38),
    (206, 326, 19, 27),
    (174, 346, 19, 27),
    (188, 359, 37, 18),
    (79, 286, 20, 29),
    (227, 223, 2, 30),
    (187, 223, 2, 29),
    (187, 225, 42, 1),
    (225, 414, 4, 8),
    (145, 458, 34, 40),
    (148, 498, 17, 64),
    (163, 558, 14, 29),
    (130, 545, 29, 15),
    (81, 532, 40, 12),
    (83, 539, 12, 21),
    (135, 475, 1, 38),
    (122, 489, 17, 22),
    (100, 506, 11, 22),
    (242, 459, 15, 38),
    (257, 445, 15, 34),
)

_SACRED_LAND_BLOCKERS = _rects(
    # outer walls
    (567, 16, 213, 10),
    (748, 34, 49, 32),
    (783, 74, 139, 149),
    (871, 210, 45, 52),
    (909, 233, 45, 91),
    (939, 295, 9, 212),
    (957, 465, 139, 16),
    (1075, 453, 38, 356),
    (870, 729, 201, 193),
    (1003, 913, 29, 192),
    (958, 969, 30, 51),
    (882, 1014, 123, 110),
    (593, 1071, 300, 41),
    (812, 1040, 13, 24),
    (717, 1031, 13, 32),
    (161, 1013, 443, 128),
    (162, 806, 55, 296),
    (212, 972, 43, 42),
    (115, 661, 169, 229),
    (136, 416, 25, 323),
    (136, 271, 150, 188),
    (289, 232, 26, 162),
    (319, 94, 90, 150),
    (396, 42, 171, 82),
    (554, 35, 53, 36),
    # inner obstacles
    (707, 146, 64, 49),
    (595, 152, 36, 50),
    (578, 178, 17, 27),
    (429, 128, 17, 27),
    (787, 220, 17, 27),
    (801, 335, 122, 1),
    (804, 335, 1, 164),
    (818, 497, 40, 82),
    (806, 454, 25, 51),
    (802, 600, 1, 62),
    (874, 657, 27, 62),
    (922, 573, 1, 146),
    (921, 482, 1, 42),
    (937, 615, 9, 42),
    (803, 652, 1, 80),
    (583, 816, 179, 63),
    (699, 859, 56, 55),
    (385, 883, 253, 35),
    (384, 886, 1, 63),
    (313, 884, 1, 63),
    (418, 815, 207, 1),
    (362, 751, 49, 41),
    (351, 565, 1, 180),
    (284, 546, 1, 180),
    (355, 562, 111, 31),
    (168, 615, 22, 37),
    (265, 433, 29, 48),
    (475, 494, 1, 67),
    (475, 498, 97, 41),
    (557, 505, 18, 59),
    (638, 496, 1, 65),
    (638, 496, 91, 40),
    (703, 539, 14, 23),
    (730, 334, 1, 162),
    (512, 334, 219, 1),
    (329, 369, 52, 34),
    (453, 369, 52, 34),
    (450, 370, 1, 65),
    (382, 370, 1, 65),
    (324, 251, 31, 34),
    (409, 265, 14, 40),
    (507, 275, 1, 88),
    (425, 270, 80, 1),
)


def village() -> WorldLayout:
    """The starting village, with the wizard and a wandering slime."""
    return WorldLayout(
        name="village",
        map_image="map1.png",
        blockers=_VILLAGE_BLOCKERS,
        player_start=(110, 200),
        wizard_start=(125, 490),
        player_speed=5,
        slime_start=(100, 100),
    )


def sacred_land() -> WorldLayout:
    """The sacred land the wizard teleports the knight to."""
    return WorldLayout(
        name="sacred_land",
        map_image="Scene Overview2.png",
        blockers=_SACRED_LAND_BLOCKERS,
        player_start=(590, 1),
        wizard_start=(520, 1),
        player_speed=8,
        sprite_scale=2.0,
        view_scale=1.2,
        view_size=(800, 800),
        axeman_start=(500, 600),
    )