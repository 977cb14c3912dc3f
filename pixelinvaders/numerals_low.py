"""Score digits 0 to 4, each a 14x14 image of 0xRRGGBB pixels."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from pixelinvaders.sprites import Drawing

DIGIT_SIZE = 14


def _digit(rows: Sequence[Sequence[int]]) -> Drawing:
    """Build a square digit drawing from its pixel rows."""
    if len(rows) != DIGIT_SIZE or any(len(row) != DIGIT_SIZE for row in rows):
        raise ValueError(f"a digit must be {DIGIT_SIZE}x{DIGIT_SIZE} pixels")
    pixels = tuple(pixel for row in rows for pixel in row)
    return Drawing(width=DIGIT_SIZE, height=DIGIT_SIZE, pixels=pixels)


_FILL = 9073478

_ZERO_ROWS = (
    (0, 986636, 8682856, 15589044, 15325356, 15325356, 15325356,
     15325356, 15325356, 15325356, 15325356, 15325356, 15852731, 1643273),
    (723721, 8682856, 15523250, 14073737, 13941894, 11638625, 13085809,
     13217652, 13283188, 13283188, 13876100, 11836261, 15260079, 7033897),
    (9143662, 15589044, 14073737, 13283188, 12100209, 8020275, 12822638,
     13217395, 13283188, 13283188, 12231537, 8349240, 14733736, 8283704),
    (15720887, 13942151, 13283188, 13282931, 11769952, 11046231, 13085809,
     13283188, 13217652, 13282931, 11967330, 11046231, 15260079, 8283704),
    (15589044, 13283188, 13217395, 13217395, 14601113, 15325613, 15325613,
     15325613, 14666650, 13217652, 13217651, 13283188, 15589043, 8283704),
    (15589044, 13283188, 13282932, 13283188, 15061925, 9600079, 7757361,
     9271373, 15061925, 13283188, 13283188, 13217395, 15589043, 8283704),
    (15589044, 13283188, 13282932, 13283188, 15061925, 8941635, 525826,
     3091749, 15061925, 13283188, 13217396, 13217395, 15589043, 7954740),
    (15589044, 13283188, 13283188, 13283188, 15061925, 11047783, 5064762,
     6906706, 15061925, 13217395, 13217652, 13217395, 15589043, 6902311),
    (15589044, 13283187, 13282932, 13283188, 14271375, 14798494, 14798494,
     14798494, 14271632, 13217395, 13217652, 13282932, 15589043, 8283704),
    (15589044, 13282931, 13283188, 13283188, 13217652, 13217651, 13282932,
     13283188, 13283188, 13283188, 13283188, 14337426, 15786681, 8283704),
    (15589044, 13744513, 12692604, 11243865, 13217395, 13283187, 13283188,
     13612670, 13087620, 10980438, 14337426, 15720887, 10718818, 8283447),
    (15589044, 12033381, 8020532, 10388302, 13282931, 13217652, 13217652,
     12362345, 8152117, 10981989, 15786680, 10653025, 7362087, 3090717),
    (14602668, 14996908, 14799529, 14931115, 15062701, 15062701, 15062701,
     14996908, 14799529, 14931372, 10587232, 6770467, 1183238, 1775893),
    (4209453,) + (_FILL,) * 10 + (4998193, 3486250, 526086),
)

_ONE_ROWS = (
    (0, 0, 6249034, 14537133, 15457199, 15325356, 15325356,
     15325356, 10063731, 2630424, 525826, 0, 0, 0),
    (5986119, 5985863, 5986119, 12563862, 13810307, 14007946, 11375195,
     13217396, 14469013, 10784611, 2037514, 0, 0, 0),
    (15589044, 14600856, 14600856, 14600856, 13546619, 11377004, 8283187,
     13217652, 14469013, 10784611, 2037514, 0, 0, 0),
    (15259562, 13941894, 12034159, 11901538, 13283187, 11243609, 11441244,
     13282932, 14469013, 10784611, 2037514, 0, 0, 0),
    (15259562, 11638882, 8086324, 11177816, 13283187, 13283188, 13217395,
     13217395, 14469013, 10784611, 1971978, 0, 0, 0),
    (15259819, 13086067, 12756846, 13151603, 13283188, 13217396, 13217652,
     13217396, 14469013, 10784611, 2037514, 0, 0, 394500),
    (13550239, 14470564, 14470564, 15457717, 13810307, 13283188, 13283188,
     13282932, 14469013, 10784611, 2037514, 0, 0, 657671),
    (6050623, 9797201, 9797201, 13812376, 13810307, 13283188, 13283188,
     13217395, 14469013, 12298622, 6116415, 4736057, 4144177, 4012592),
    (15654837, 14798494, 14798494, 14798494, 13546876, 13282932, 13282932,
     13217395, 13942151, 14798494, 14798494, 14798494, 14471082, 6313275),
    (15259562, 13283188, 13283188, 13283188, 13283188, 13217652, 13217652,
     13217395, 13283188, 13283188, 13283188, 13283188, 14865322, 9336650),
    (15259562, 14007688, 11902831, 11770208, 13283188, 13283188, 13283188,
     13282932, 13283188, 14337426, 10718042, 12625259, 14865322, 9336650),
    (15259562, 11441503, 7888688, 11177816, 13217652, 13283188, 13283187,
     13217652, 13217652, 10586196, 7559723, 12362088, 14865322, 9336650),
    (14602668, 14931115, 14799529, 14931371, 15062701, 15062701, 15062701,
     15062701, 15062701, 14865579, 14799529, 14996908, 14207391, 9007685),
    (4998193,) + (_FILL,) * 11 + (8678721, 5061919),
)

_TWO_ROWS = (
    (15720631, 15325356, 15325356, 15325356, 15325356, 15325356, 15325356,
     15325356, 15325356, 15786680, 5722948, 131585, 0, 0),
    (14930081, 13744514, 12099434, 12756845, 13283188, 13283188, 13217652,
     13283188, 13283188, 14469012, 15786681, 5525314, 0, 0),
    (14930081, 12362865, 8678462, 11901538, 13283188, 13283188, 13217395,
     13217652, 13283188, 13283188, 14402962, 15063219, 6117449, 0),
    (14930081, 12098917, 11046231, 12756845, 13217395, 13283188, 13283188,
     13217395, 13283188, 13283188, 13217395, 14403219, 13220757, 8812373),
    (15720887, 15325613, 15325613, 15325613, 15325613, 15325613, 15325613,
     14403219, 13282932, 13283187, 13217651, 13546876, 13812376, 10455645),
    (4076576, 12232829, 15918268, 14007945, 13481083, 13481083, 13481083,
     13414775, 13283188, 13283188, 13348982, 13349497, 13812376, 5061661),
    (7762012, 15720887, 14073737, 13283187, 13283188, 13283187, 13283188,
     13282931, 13283188, 13282931, 14272668, 8283447, 13812376, 4469782),
    (15654837, 14139789, 13283188, 13217395, 13283188, 13414775, 14073738,
     14073738, 14073738, 14073738, 10455130, 10455645, 13812376, 6311468),
    (14930081, 13283188, 13283188, 13217652, 13282932, 13546619, 14798494,
     14798494, 14798494, 14798494, 14798494, 14930081, 13812376, 10455645),
    (14930081, 13283188, 13217652, 13283188, 13283188, 13283188, 13283188,
     13283188, 13283188, 13283188, 13283188, 13546876, 13812376, 10455645),
    (14930081, 14205582, 11178594, 12296551, 13283188, 13282932, 13283187,
     13217652, 13217396, 13283187, 14864287, 9928269, 13812376, 10455645),
    (14930081, 10914904, 7691053, 11901538, 13283188, 13283188, 13283187,
     13217652, 13282931, 13217395, 9401927, 8151861, 13812376, 10455645),
    (14734253, 14931115, 14799529, 14996908, 15062701, 15062701, 15062701,
     15062701, 15062701, 15062701, 14799786, 14799786, 13219982, 9929303),
    (5721141,) + (_FILL,) * 9 + (6113314, 5587228, 5521436, 4799265),
)

_THREE_ROWS = (
    (15589300,) + (15325356,) * 10 + (15457200, 10787195, 8879459),
    (14600856, 13876357, 11704419, 13020017, 13283188, 13283188, 13217396,
     13217396, 13283188, 13283188, 13876617, 12099950, 12693637, 11508848),
    (14600856, 12100209, 8086325, 12691052, 13217652, 13283188, 13217652,
     13217395, 13283188, 13283188, 11113576, 9205064, 12693637, 11508848),
    (14600856, 11835745, 11046231, 13020017, 13217651, 13283187, 13217395,
     13217651, 13283188, 13282931, 11112024, 12165743, 12693637, 11508848),
    (15654837,) + (15325613,) * 7
    + (13876100, 13283187, 13283187, 13876101, 12693637, 11508848),
    (4668194, 7757361, 7757361, 15128750, 13481083, 13481083, 13481083,
     13481083, 13348982, 13283188, 13282932, 13876101, 12693637, 11508848),
    (0, 0, 0, 14339752, 13283188, 13283188, 13217396,
     13217395, 13282932, 13217651, 13283188, 13876101, 12693637, 11508848),
    (4736313, 4736313, 4736313, 14866095, 14073738, 14073738, 14073738,
     14073738, 13480826, 13283188, 13283188, 13876101, 12693637, 11508848),
    (15391149,) + (14798494,) * 7
    + (13678720, 13283188, 13283188, 13876101, 12693637, 11508848),
    (14600856, 13283188, 13217652, 13217652, 13283187, 13283188, 13283188,
     13283187, 13283188, 13283188, 13283188, 13876101, 12693637, 11508848),
    (14600856, 14469012, 10389076, 12822894, 13217652, 13283188, 13282932,
     13283188, 13283187, 13282932, 14469530, 10652250, 12693637, 11508848),
    (14600856, 10323025, 7493674, 12691052, 13217395, 13217395, 13217651,
     13217652, 13217651, 13283188, 8678461, 9205064, 12693637, 11508848),
    (14734252, 14865322, 14799529, 14997164) + (15062701,) * 6
    + (14799529, 14865579, 12232572, 10785384),
    (6378296,) + (_FILL,) * 11 + (7823670, 4602403),
)

_FOUR_ROWS = (
    (8879459, 15523250, 15325356, 15325356, 15391406, 11708295, 986117,
     0, 11051140, 15391407, 15325356, 15325356, 15523250, 9011045),
    (11508848, 14271375, 14007945, 11375452, 13678720, 13351568, 4075284,
     0, 11116676, 13744256, 13348982, 13481858, 12758139, 11640178),
    (11508848, 14271375, 11903088, 7757102, 13678720, 13351568, 4009748,
     0, 11051140, 13744256, 13086067, 10521438, 10323803, 11640178),
    (11508848, 14271375, 11572573, 11112024, 13678720, 13351568, 4075284,
     0, 11116676, 13744256, 13020017, 11046231, 12823932, 11640178),
    (11508848, 14271375, 13217395, 13283188, 13678720, 15326131, 13155222,
     12300690, 14865840, 13744256, 13217652, 13283187, 14205582, 11640178),
    (11508848, 14271375, 13348981, 13085809, 13283189, 13481083, 13481083,
     13481083, 13481083, 13283189, 13283188, 13217395, 14205582, 11640178),
    (11508848, 14271375, 14206617, 8086067, 13217395, 13283188, 13283188,
     13283188, 13283188, 13217395, 13283188, 13217651, 14205582, 11640178),
    (11508848, 14732701, 10784351, 9928787, 14073738, 14073738, 14073738,
     14073738, 13481082, 13283188, 13217395, 13217395, 14205582, 11640178),
    (11508848, 15194025) + (14798494,) * 6
    + (13744256, 13283188, 13282931, 13217395, 14205582, 11640178),
    (11508848, 14271375, 13283188, 13283188, 13217395, 13217396, 13283188,
     13283188, 13283188, 13283187, 13283188, 13612669, 15193769, 11640178),
    (11508848, 14271375, 14666907, 9730889, 13217652, 13283188, 13283188,
     13282932, 13283187, 13283187, 13415032, 15325612, 13746583, 8481083),
    (11508848, 14271375, 9731147, 7493673, 13283187, 13283188, 13283187,
     13217395, 13283187, 13283188, 15457199, 14273185, 8086325, 4206869),
    (10785384, 14865580, 14865322, 14799529) + (15062701,) * 6
    + (14404771, 7230760, 4272662, 197121),
    (4602403, 7101500) + (_FILL,) * 8 + (8744513, 4272662, 0, 0),
)


@lru_cache(maxsize=None)
def get_zero() -> Drawing:
    """Return the digit 0."""
    return _digit(_ZERO_ROWS)


@lru_cache(maxsize=None)
def get_one() -> Drawing:
    """Return the digit 1."""
    return _digit(_ONE_ROWS)


@lru_cache(maxsize=None)
def get_two() -> Drawing:
    """Return the digit 2."""
    return _digit(_TWO_ROWS)


@lru_cache(maxsize=None)
def get_three() -> Drawing:
    """Return the digit 3."""
    return _digit(_THREE_ROWS)


@lru_cache(maxsize=None)
def get_four() -> Drawing:
    """Return the digit 4."""
    return _digit(_FOUR_ROWS)