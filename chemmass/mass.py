# This program is public domain
"""
Relative atomic mass of the elements.

Values are the standard atomic weights rounded to the nearest integer, which
is the precision used in introductory chemistry (H=1, C=12, O=16, Fe=56).
Chlorine keeps its customary half unit, 35.5. For elements with no stable
isotope the value is the mass number of the longest lived isotope.

The table is read-only::

    >>> from chemmass.mass import ATOMIC_MASS, relative_atomic_mass
    >>> relative_atomic_mass('Fe')
    56.0
    >>> relative_atomic_mass('Xx')
    0.0
    >>> 'Xx' in ATOMIC_MASS
    False
"""

__docformat__ = 'restructuredtext en'
__all__ = ['ATOMIC_MASS', 'relative_atomic_mass']

from types import MappingProxyType

# pylint: disable=bad-whitespace
_atomic_mass: dict[str, float] = {
    'H': 1.0,    'He': 4.0,   'Li': 7.0,   'Be': 9.0,   'B': 11.0,   'C': 12.0,
    'N': 14.0,   'O': 16.0,   'F': 19.0,   'Ne': 20.0,  'Na': 23.0,  'Mg': 24.0,
    'Al': 27.0,  'Si': 28.0,  'P': 31.0,   'S': 32.0,   'Cl': 35.5,  'Ar': 40.0,
    'K': 39.0,   'Ca': 40.0,  'Sc': 45.0,  'Ti': 48.0,  'V': 51.0,   'Cr': 52.0,
    'Mn': 55.0,  'Fe': 56.0,  'Co': 59.0,  'Ni': 59.0,  'Cu': 64.0,  'Zn': 65.0,
    'Ga': 70.0,  'Ge': 73.0,  'As': 75.0,  'Se': 79.0,  'Br': 80.0,  'Kr': 84.0,
    'Rb': 85.0,  'Sr': 88.0,  'Y': 89.0,   'Zr': 91.0,  'Nb': 93.0,  'Mo': 96.0,
    'Tc': 97.0,  'Ru': 101.0, 'Rh': 103.0, 'Pd': 106.0, 'Ag': 108.0, 'Cd': 112.0,
    'In': 115.0, 'Sn': 119.0, 'Sb': 122.0, 'Te': 128.0, 'I': 127.0,  'Xe': 131.0,
    'Cs': 133.0, 'Ba': 137.0, 'La': 139.0, 'Ce': 140.0, 'Pr': 141.0, 'Nd': 144.0,
    'Pm': 145.0, 'Sm': 150.0, 'Eu': 152.0, 'Gd': 157.0, 'Tb': 159.0, 'Dy': 163.0,
    'Ho': 165.0, 'Er': 167.0, 'Tm': 169.0, 'Yb': 173.0, 'Lu': 175.0, 'Hf': 178.0,
    'Ta': 181.0, 'W': 184.0,  'Re': 186.0, 'Os': 190.0, 'Ir': 192.0, 'Pt': 195.0,
    'Au': 197.0, 'Hg': 201.0, 'Tl': 204.0, 'Pb': 207.0, 'Bi': 209.0, 'Po': 209.0,
    'At': 210.0, 'Rn': 222.0, 'Fr': 223.0, 'Ra': 226.0, 'Ac': 227.0, 'Th': 232.0,
    'Pa': 231.0, 'U': 238.0,  'Np': 237.0, 'Pu': 244.0, 'Am': 243.0, 'Cm': 247.0,
    'Bk': 247.0, 'Cf': 251.0, 'Es': 252.0, 'Fm': 257.0, 'Md': 258.0, 'No': 259.0,
    'Lr': 266.0, 'Rf': 267.0, 'Db': 268.0, 'Sg': 269.0, 'Bh': 270.0, 'Hs': 269.0,
    'Mt': 277.0, 'Ds': 282.0, 'Rg': 282.0, 'Cn': 286.0, 'Nh': 286.0, 'Fl': 290.0,
    'Mc': 290.0, 'Lv': 293.0, 'Ts': 294.0, 'Og': 295.0,
}
# pylint: enable=bad-whitespace

ATOMIC_MASS = MappingProxyType(_atomic_mass)
"""Mapping from element symbol to relative atomic mass."""

def relative_atomic_mass(symbol: str) -> float:
    """
    Return the relative atomic mass for the element *symbol*.

    :Parameters:
        *symbol* : string
            Element symbol, with the capitalization used in formulas.

    :Returns: float

    Unknown symbols return 0.0.  No element has zero mass, so a zero
    result always means the symbol was not found.  Use
    ``symbol in ATOMIC_MASS`` when the distinction matters.
    """
    return _atomic_mass.get(symbol, 0.)
