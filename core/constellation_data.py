"""
Constellation stick figures, J2000 RA/Dec in degrees.

A small set of the well known figures. Each figure is a list of segments
between named bright stars; the same star table doubles as the demo star
catalogue.
"""

from typing import Dict, List, Tuple

Segment = Tuple[Tuple[float, float], Tuple[float, float]]

# fmt: off
_S = {
    # Orion
    "Betelgeuse": ( 88.7930,  7.4070), "Rigel":      ( 78.6340, -8.2020),
    "Bellatrix":  ( 81.2830,  6.3500), "Saiph":      ( 86.9390, -9.6700),
    "Alnitak":    ( 85.1900, -1.9430), "Alnilam":    ( 84.0530, -1.2020),
    "Mintaka":    ( 83.0020, -0.2990), "Meissa":     ( 83.8580,  9.9340),
    # Taurus
    "Aldebaran":  ( 68.9800, 16.5090), "Elnath":     ( 81.5730, 28.6080),
    "Ain":        ( 67.1540, 19.1800), "Alcyone":    ( 56.8710, 24.1050),
    # Gemini
    "Castor":     (113.6490, 31.8880), "Pollux":     (116.3290, 28.0260),
    "Alhena":     ( 99.4280, 16.3990), "Wasat":      (110.0310, 21.9820),
    # Cassiopeia
    "Schedar":    ( 10.1270, 56.5370), "Caph":       (  2.2950, 59.1500),
    "Gamma Cas":  ( 14.1770, 60.7170), "Ruchbah":    ( 21.4540, 60.2350),
    "Segin":      ( 28.5990, 63.6700),
    # Ursa Major
    "Dubhe":      (165.9320, 61.7510), "Merak":      (165.4600, 56.3830),
    "Phecda":     (178.4580, 53.6950), "Megrez":     (183.8570, 57.0330),
    "Alioth":     (193.5070, 55.9600), "Mizar":      (200.9810, 54.9260),
    "Alkaid":     (206.8860, 49.3130),
    # Lyra
    "Vega":       (279.2350, 38.7840), "Sheliak":    (282.5200, 33.3630),
    "Sulafat":    (284.7360, 32.6900), "Delta Lyr":  (281.1940, 36.8980),
    # Cygnus
    "Deneb":      (310.3580, 45.2800), "Sadr":       (305.5570, 40.2570),
    "Gienah":     (311.5530, 33.9700), "Albireo":    (292.6800, 27.9600),
    "Fawaris":    (296.2440, 45.1310),
    # Scorpius
    "Antares":    (247.3520,-26.4320), "Graffias":   (241.3590,-19.8060),
    "Dschubba":   (240.0830,-22.6220), "Shaula":     (263.4020,-37.1030),
    "Sargas":     (262.6910,-42.9980),
}
# fmt: on


def _seg(a: str, b: str) -> Segment:
    return (_S[a], _S[b])


def _chain(*names: str) -> List[Segment]:
    return [_seg(names[i], names[i + 1]) for i in range(len(names) - 1)]


def _loop(*names: str) -> List[Segment]:
    return _chain(*names, names[0])


def get_constellation_patterns() -> Dict[str, List[Segment]]:
    return {
        "Orion": (
            _chain("Meissa", "Betelgeuse", "Bellatrix") +
            _chain("Mintaka", "Alnilam", "Alnitak", "Saiph", "Rigel", "Mintaka") +
            _chain("Bellatrix", "Mintaka") + _chain("Betelgeuse", "Alnitak")
        ),
        "Taurus": _chain("Alcyone", "Aldebaran", "Ain", "Elnath"),
        "Gemini": _chain("Castor", "Pollux", "Wasat", "Alhena"),
        "Cassiopeia": _chain("Caph", "Schedar", "Gamma Cas", "Ruchbah", "Segin"),
        "Ursa Major": (
            _loop("Dubhe", "Merak", "Phecda", "Megrez") +
            _chain("Megrez", "Alioth", "Mizar", "Alkaid")
        ),
        "Lyra": _chain("Vega", "Sheliak") + _loop("Sheliak", "Sulafat", "Delta Lyr"),
        "Cygnus": (
            _chain("Deneb", "Sadr", "Albireo") +
            _chain("Fawaris", "Sadr", "Gienah")
        ),
        "Scorpius": _chain("Graffias", "Dschubba", "Antares", "Shaula", "Sargas"),
    }


def get_named_stars() -> Dict[str, Tuple[float, float]]:
    """Name -> (ra_deg, dec_deg) for every star used by the figures."""
    return dict(_S)
