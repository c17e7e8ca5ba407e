# This program is public domain
"""
Chemical formula mass calculation.

A formula is a run of element symbols, each followed by an optional count::

    >>> from chemmass.formulas import calculate_molar_mass
    >>> calculate_molar_mass('H2O')
    18.0
    >>> calculate_molar_mass('C6H12O6')
    180.0

The scanner matches one capital letter, an optional lower case letter and
an optional run of digits.  Anything else in the string, such as spaces,
charges or parentheses, is skipped.  Groups are not expanded, so 'Ca(OH)2'
is read as Ca, O and H with the trailing count dropped.

Symbols which are not elements contribute no mass.  A warning is logged for
each one.  Use *strict=True* to raise :class:`UnknownElementError
<chemmass.core.UnknownElementError>` instead.

The mass of a formula can be calculated from the command line using::

    $ python -m chemmass.formulas FORMULA
"""

__docformat__ = 'restructuredtext en'
__all__ = ['formula', 'Formula', 'FormulaInput', 'tokenize',
           'calculate_molar_mass']

import logging
import re
from collections.abc import Iterator, Sequence
from typing import Union

from .core import UnknownElementError
from .mass import ATOMIC_MASS

logger = logging.getLogger(__name__)

# ASCII digits only; other unicode digits are skipped like any other character.
TOKEN_PATTERN = re.compile(r'([A-Z][a-z]?)([0-9]*)')

Token = tuple[str, int]

def tokenize(compound: str) -> Iterator[Token]:
    """
    Yield (symbol, count) pairs from *compound* in the order they appear.

    A missing count, or a count of 0, is taken as 1.  Repeated symbols are
    returned separately, so 'CH3COOH' gives six tokens.

    :Raises:
        *ValueError* if a count has more digits than the interpreter will
        convert to an integer (see :func:`sys.get_int_max_str_digits`).
    """
    for match in TOKEN_PATTERN.finditer(compound):
        symbol, digits = match.groups()
        try:
            count = int(digits) if digits else 0
        except ValueError:
            raise ValueError("count for %s in formula has %d digits, which is too long"
                             % (symbol, len(digits))) from None
        yield symbol, count if count else 1

def _structure_mass(structure: Sequence[Token], strict: bool) -> float:
    mass = 0.
    for symbol, count in structure:
        if symbol not in ATOMIC_MASS:
            if strict:
                raise UnknownElementError("unknown element "+symbol)
            logger.warning("no atomic mass for %r; counting it as 0", symbol)
            continue
        mass += ATOMIC_MASS[symbol]*count
    return mass

class Formula:
    """
    Simple chemical formula representation.

    The formula keeps the tokens in the order they were written, so
    ``str(formula)`` gives back the normalized input.  Use *atoms* for the
    total count of each element, or *hill* for the formula in Hill order.
    """
    structure: tuple[Token, ...]
    name: str|None

    def __init__(self, structure: Sequence[Token]=(), name: str|None=None):
        self.structure = tuple(structure)
        self.name = name

    @property
    def atoms(self) -> dict[str, int]:
        """
        Number of atoms of each element, in order of first appearance.
        """
        counts: dict[str, int] = {}
        for symbol, count in self.structure:
            counts[symbol] = counts.get(symbol, 0) + count
        return counts

    @property
    def mass(self) -> float:
        """
        Molar mass of the formula, with unknown elements counted as 0.
        """
        return _structure_mass(self.structure, strict=False)

    @property
    def hill(self) -> "Formula":
        """
        Formula in Hill order: carbon first, hydrogen second, then the
        remaining elements alphabetically.  Without carbon all elements,
        hydrogen included, are alphabetical.
        """
        atoms = self.atoms
        if 'C' in atoms:
            first = [s for s in ('C', 'H') if s in atoms]
        else:
            first = []
        rest = sorted(s for s in atoms if s not in first)
        return Formula([(s, atoms[s]) for s in first + rest], name=self.name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self.atoms == other.atoms

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.atoms.items())))

    def __str__(self) -> str:
        return "".join(symbol if count == 1 else "%s%d"%(symbol, count)
                       for symbol, count in self.structure)

    def __repr__(self) -> str:
        return "formula('%s')"%(str(self))

FormulaInput = Union[str, Formula, Sequence[Token], None]

def formula(compound: FormulaInput=None, name: str|None=None) -> Formula:
    """
    Construct a chemical formula representation.

    :Parameters:
        *compound* : string, Formula or [(symbol, count), ...]
            Formula text such as 'NaCl', an existing formula, or a sequence
            of (symbol, count) pairs.  Use None for an empty formula.
        *name* : string
            Optional common name for the compound.

    :Returns: Formula
    """
    if compound is None:
        structure: Sequence[Token] = ()
    elif isinstance(compound, Formula):
        structure = compound.structure
        if name is None:
            name = compound.name
    elif isinstance(compound, str):
        structure = tuple(tokenize(compound))
    else:
        structure = tuple((symbol, int(count)) for symbol, count in compound)
    return Formula(structure, name=name)

def calculate_molar_mass(compound: Union[str, Formula], strict: bool=False) -> float:
    """
    Return the molar mass of a chemical formula.

    :Parameters:
        *compound* : string or Formula
            Chemical formula, such as 'H2O'.
        *strict* : boolean
            If True, raise an error for symbols which are not elements
            rather than counting them as zero mass.

    :Returns: float
        Sum of count times relative atomic mass over the formula tokens.
        The empty formula has mass 0.

    :Raises:
        *UnknownElementError* in strict mode if a symbol is not an element.
    """
    if isinstance(compound, Formula):
        structure = compound.structure
    else:
        structure = tuple(tokenize(compound))
    return _structure_mass(structure, strict=strict)

def demo(argv: Sequence[str]|None=None) -> None:
    import argparse
    from .core import get_property

    parser = argparse.ArgumentParser(description='Print the molar mass of chemical formulas.')
    parser.add_argument('--strict', action='store_true', help='Reject symbols which are not elements')
    parser.add_argument('-p', '--property', nargs=2, metavar=('Z', 'KEYWORD'),
                        help='Print the KEYWORD property of element Z')
    parser.add_argument('formula', nargs='*', type=str, help='Chemical formula, such as H2O')
    args = parser.parse_args(argv)

    logging.basicConfig(format='%(levelname)s: %(message)s')

    if args.property is not None:
        Z, keyword = args.property
        try:
            value = get_property(int(Z), keyword)
        except ValueError as exc:
            parser.error(str(exc))
        if value is None:
            parser.error("no element with atomic number %s"%Z)
        print(value)
        if not args.formula:
            return

    formulas = args.formula if args.formula else ['H2O']
    for compound in formulas:
        try:
            mass = calculate_molar_mass(compound, strict=args.strict)
        except ValueError as exc:
            parser.error(str(exc))
        if len(formulas) == 1:
            print(mass)
        else:
            print(f"{compound} {mass}")

if __name__ == "__main__":
    demo()  # pragma: nocover
