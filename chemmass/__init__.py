# This program is public domain
"""
Molar mass of chemical formulas and element property lookup.

The chemmass package contains the relative atomic mass of the elements and
a table of element properties such as name, electron configuration, melting
point and density.  Molar masses are calculated from simple chemical
formulas such as 'H2O' or 'C6H12O6'.

    >>> import chemmass
    >>> chemmass.calculate_molar_mass('NaCl')
    58.5
    >>> chemmass.get_property(26, 'Name')
    'Iron'
    >>> chemmass.get_property_float(26, 'Density')
    7.874

----

Disclaimer:

The property table is an export of the PubChem periodic table.  It has not
been critically evaluated, and the atomic masses used for formula mass are
rounded to the precision of introductory chemistry.

----

"""

__docformat__ = 'restructuredtext en'
__version__ = "1.0.0"

__all__ = ['elements'] # Lazy symbols added later

import importlib

from . import core
from .core import (
    Keyword, ElementRow, PropertyTable,
    get_property, get_property_int, get_property_float, get_property_double,
    DatasetError, UnknownKeywordError, UnknownElementError, PropertyParseError,
    )
from .mass import ATOMIC_MASS, relative_atomic_mass

__all__ += [
    'Keyword', 'ElementRow', 'PropertyTable',
    'get_property', 'get_property_int', 'get_property_float', 'get_property_double',
    'DatasetError', 'UnknownKeywordError', 'UnknownElementError', 'PropertyParseError',
    'ATOMIC_MASS', 'relative_atomic_mass',
    ]

_LAZY_MODULES: list[str] = ['dataset', 'formulas']
_LAZY_LOAD = {
    'formula': 'formulas',
    'Formula': 'formulas',
    'tokenize': 'formulas',
    'calculate_molar_mass': 'formulas',
}
def __getattr__(name: str):
    """
    Lazy loading of modules and symbols from other modules. This is
    equivalent to using "from .formulas import formula" etc in __init__
    except that the import doesn't happen until the symbol is referenced.
    Using "from chemmass import formula" will import the symbol immediately.
    "from chemmass import *" will import all symbols, including the lazy
    """
    module_name = _LAZY_LOAD.get(name, None)
    if module_name is not None:
        # Lazy symbol: fetch name from the target module
        module = importlib.import_module(f'{__name__}.{module_name}')
        symbol = getattr(module, name)
        globals()[name] = symbol
        return symbol
    if name in _LAZY_MODULES:
        # Lazy module: just need to import it
        return importlib.import_module(f'{__name__}.{name}')
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
def __dir__():
    return __all__
# Support 'from chemmass import *' and 'dir(chemmass)'
__all__ = [*__all__, *_LAZY_MODULES, *_LAZY_LOAD.keys()]

elements = core.PUBLIC_TABLE

# Lazy loading of the element rows, e.g., elements[26]
def _load_elements():
    """
    Element property rows from the PubChem periodic table.

    Reference:
        *PubChem Periodic Table of Elements, National Center for
        Biotechnology Information.*
    """
    from . import dataset
    dataset.init(elements)
core.delayed_load(['rows'], _load_elements)
del _load_elements


# Data needed for setup.py when bundling the package into an exe
def data_files():
    """
    Return the data files associated with the element table.

    The format is a list of (directory, [files...]) pairs which can be
    used directly in setup(..., data_files=...) for setup.py.
    """
    import os
    import glob
    from .core import get_data_path

    files = glob.glob(os.path.join(get_data_path('.'), '*.xml'))
    return [('chemmass-data', files)]
