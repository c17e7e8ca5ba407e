# This program is public domain
"""
Core classes for the element property table.

* :class:`PropertyTable`
   Rows of element properties, addressed by atomic number.

   .. Note:: PropertyTable is not a singleton class.  Use ``chemmass.elements``
      to access the common table.

* :class:`ElementRow`
   The property cells for a single element.

* :class:`Keyword`
   Names of the property columns, with their position in the row.

Property values are retrieved with :func:`get_property`, which returns the
text of the cell, or with the typed variants :func:`get_property_int` and
:func:`get_property_float`.  All three return *None* when the table has no
row for the atomic number, and raise :class:`UnknownKeywordError` when the
keyword does not name a column.

Helper functions:

* :func:`delayed_load`
    Delay loading the table rows until they are needed.

* :func:`get_data_path`
    Return the path to the data files.

* :func:`default_table`
    Returns the common property table.
"""

__docformat__ = 'restructuredtext en'
__all__ = ['delayed_load', 'get_data_path', 'default_table',
           'get_property', 'get_property_int', 'get_property_float',
           'get_property_double',
           'Keyword', 'ElementRow', 'PropertyTable',
           'DatasetError', 'UnknownKeywordError', 'UnknownElementError',
           'PropertyParseError']

import logging
from enum import IntEnum
from typing import Any, Union, TypeVar
from collections.abc import Sequence, Callable, Iterator

logger = logging.getLogger(__name__)

PUBLIC_TABLE_NAME = "public"

T = TypeVar('T', int, float)

class DatasetError(RuntimeError):
    """The element dataset is missing or malformed."""

class UnknownKeywordError(KeyError, ValueError):
    """The property keyword does not name a column of the table."""
    def __init__(self, keyword: Any):
        super().__init__(keyword)
        self.keyword = keyword
    def __str__(self) -> str:
        return "unknown property keyword %r"%(self.keyword,)

class UnknownElementError(ValueError):
    """The element symbol is not in the table."""

class PropertyParseError(ValueError):
    """The property cell does not hold a value of the requested type."""

def delayed_load(all_props: Sequence[str], loader: Callable[[], None]):
    """
    Delayed loading of the property table.  When any of the properties
    is first accessed the loader will be called to load the associated
    data. The help string starts out as the help string for the loader
    function.

    If the loader fails the properties are restored, so the next access
    tries the load again.
    """
    def clearprops():
        """
        Remove the properties so that the attribute can be accessed
        directly.
        """
        for p in all_props:
            delattr(PropertyTable, p)

    def getter(propname):
        """
        Property getter for attribute propname.

        The first time the prop is accessed, the prop itself will be
        deleted and the data loader for the property will be called
        to set the real values.  Subsequent references to the property
        will be to the actual data.
        """
        def getfn(table):
            clearprops()
            try:
                loader()
            except Exception:
                install()
                raise
            return getattr(table, propname)
        return getfn

    def setter(propname):
        """
        Property setter for attribute propname.

        This is called when rows are assigned to a table before the
        common table has been loaded, for example when a private table is
        loaded from a different file.  Clear the delayed load property,
        load the common table, then set the value as usual.
        """
        def setfn(table, value):
            clearprops()
            try:
                loader()
            except Exception:
                install()
                raise
            setattr(table, propname, value)
        return setfn

    doc = loader.__doc__
    def install():
        for p in all_props:
            setattr(PropertyTable, p, property(getter(p), setter(p), doc=doc))
    install()

class Keyword(IntEnum):
    """
    Property columns of the element table.

    The value of each member is the position of the column within an
    :class:`ElementRow`.  Position 0 holds the atomic number.
    """
    Symbol = 1
    Name = 2
    AtomicMass = 3
    CPKHexColor = 4
    ElectronConfiguration = 5
    Electronegativity = 6
    AtomicRadius = 7
    IonizationEnergy = 8
    ElectronAffinity = 9
    OxidationStates = 10
    StandardState = 11
    MeltingPoint = 12
    BoilingPoint = 13
    Density = 14
    GroupBlock = 15
    YearDiscovered = 16

    @classmethod
    def lookup(cls, keyword: Union["Keyword", str]) -> "Keyword":
        """
        Return the column for *keyword*, which is either a member of
        :class:`Keyword` or the exact name of one.

        :Raises:
            *UnknownKeywordError* if the keyword is not a column name.
        """
        if isinstance(keyword, Keyword):
            return keyword
        if isinstance(keyword, str) and keyword in cls.__members__:
            return cls.__members__[keyword]
        logger.debug("rejecting property keyword %r", keyword)
        raise UnknownKeywordError(keyword)

ROW_WIDTH = len(Keyword) + 1

class ElementRow(tuple):
    """
    Property cells for one element, in column order.

    Cells are the text from the dataset, with empty cells as ''.
    Index with a :class:`Keyword` to get a specific property.
    """
    __slots__ = ()

    @property
    def number(self) -> int:
        """Atomic number"""
        return int(self[0])

    @property
    def symbol(self) -> str:
        return self[Keyword.Symbol]

    @property
    def name(self) -> str:
        return self[Keyword.Name]

    def __repr__(self) -> str:
        return "ElementRow(%d, %s)"%(self.number, self.symbol)

class PropertyTable:
    """
    Defines the element property table.  Individual rows are accessed by
    atomic number, or by symbol or name.

    For example, the following all retrieve the row for iron:

    .. doctest::

        >>> from chemmass import elements
        >>> print(elements[26].name)
        Iron
        >>> print(elements.symbol('Fe').name)
        Iron
        >>> print(elements.name('iron').name)
        Iron

    To show all the elements in the table, use the iterator:

    .. doctest::

        >>> for row in elements:  # doctest: +ELLIPSIS, +NORMALIZE_WHITESPACE
        ...     print(row.symbol, row.name)
        H Hydrogen
        He Helium
        ...
        Og Oganesson

    The rows are loaded from the dataset on first use.
    """
    properties: list[str]
    """Properties loaded into the table"""

    rows: tuple[ElementRow, ...]
    """Table rows, with the row for atomic number Z at index Z-1"""

    def __init__(self, table: str) -> None:
        if table in PRIVATE_TABLES:
            raise ValueError("Property table '%s' is already defined"%table)
        PRIVATE_TABLES[table] = self
        self.table = table
        self.properties = []

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, Z: int) -> ElementRow:
        """
        Retrieve the row for element Z.
        """
        row = self.get(Z)
        if row is None:
            raise KeyError("no element with atomic number %s"%(Z,))
        return row

    def __iter__(self) -> Iterator[ElementRow]:
        """
        Process the elements in Z order
        """
        return iter(self.rows)

    def get(self, Z: int) -> ElementRow|None:
        """
        Return the row for atomic number *Z*, or *None* if the table has
        no such row.
        """
        if 1 <= Z <= len(self.rows):
            return self.rows[Z-1]
        return None

    def symbol(self, input: str) -> ElementRow:
        """
        Lookup an element in the table using its symbol.

        :Parameters:
            *input* : string
                Element symbol to be looked up in the table.

        :Returns: ElementRow

        :Raises:
            UnknownElementError if the element symbol is not defined.
        """
        for row in self.rows:
            if input == row.symbol:
                return row
        raise UnknownElementError("unknown element "+input)

    def name(self, input: str) -> ElementRow:
        """
        Lookup an element given its name.  The comparison ignores case.

        :Raises:
            UnknownElementError if the element name is not defined.
        """
        target = input.lower()
        for row in self.rows:
            if target == row.name.lower():
                return row
        raise UnknownElementError("unknown element "+input)

PRIVATE_TABLES: dict[str, PropertyTable] = {}

def default_table(table: PropertyTable|None=None) -> PropertyTable:
    """
    Return the default table unless a specific table has been requested.

    This is to be used in a context like::

        def summary(table=None):
            table = core.default_table(table)
            ...
    """
    return table if table is not None else PUBLIC_TABLE

def get_property(atomic_number: int, keyword: Keyword|str,
                 table: PropertyTable|None=None) -> str|None:
    """
    Return the text of a property cell.

    :Parameters:
        *atomic_number* : int
            Atomic number of the element, starting from 1.
        *keyword* : Keyword or string
            Column name, such as 'Symbol' or 'MeltingPoint'.
        *table* : PropertyTable
            Table to search, or the common table if not given.

    :Returns: string or None
        The cell text, which is '' when the dataset has no value for the
        element, or *None* when the table has no row for *atomic_number*.

    :Raises:
        *UnknownKeywordError* if *keyword* is not a column name.

    .. doctest::

        >>> from chemmass import get_property
        >>> get_property(1, 'Name')
        'Hydrogen'
        >>> print(get_property(999999, 'Name'))
        None
    """
    column = Keyword.lookup(keyword)
    row = default_table(table).get(atomic_number)
    if row is None:
        return None
    return row[column]

def _typed_property(atomic_number: int, keyword: Keyword|str,
                    kind: Callable[[str], T],
                    table: PropertyTable|None) -> T|None:
    text = get_property(atomic_number, keyword, table=table)
    if text is None or text == '':
        return None
    try:
        return kind(text)
    except ValueError:
        raise PropertyParseError(
            "%s of element %d is %r, not %s"
            % (Keyword.lookup(keyword).name, atomic_number, text, kind.__name__))

def get_property_int(atomic_number: int, keyword: Keyword|str,
                     table: PropertyTable|None=None) -> int|None:
    """
    Return a property as an integer.

    Returns *None* if the element is not in the table or the cell is empty.

    :Raises:
        *PropertyParseError* if the cell is not an integer.
        *UnknownKeywordError* if *keyword* is not a column name.
    """
    return _typed_property(atomic_number, keyword, int, table)

def get_property_float(atomic_number: int, keyword: Keyword|str,
                       table: PropertyTable|None=None) -> float|None:
    """
    Return a property as a floating point value.

    Returns *None* if the element is not in the table or the cell is empty.

    :Raises:
        *PropertyParseError* if the cell is not a number.
        *UnknownKeywordError* if *keyword* is not a column name.
    """
    return _typed_property(atomic_number, keyword, float, table)

get_property_double = get_property_float

def get_data_path(data: str) -> str:
    """
    Locate the directory for the data files.

    :Parameters:
         *data* : string
              Name of the subdirectory within the data directory, or '.'
              for the data directory itself.

    :Returns: string
         Path to the data.

    The data directory is taken from the CHEMMASS_DATA environment variable
    if it is set, otherwise from the package, otherwise from chemmass-data
    next to the executable for bundled applications.
    """
    import sys
    import os

    # Check for data path in the environment
    key = 'CHEMMASS_DATA'
    if key in os.environ:
        path = os.path.join(os.environ[key], data)
        if not os.path.isdir(path):
            raise RuntimeError('Path in environment %s not a directory'%key)
        return path

    # Check for data path in the package
    path = os.path.join(os.path.dirname(__file__), 'data', data)
    if os.path.isdir(path):
        return path

    # Check for data path next to exe/zip file.
    exepath = os.path.dirname(sys.executable)
    path = os.path.join(exepath, 'chemmass-data', data)
    if os.path.isdir(path):
        return path

    raise RuntimeError('Could not find the chemmass data files')

# Make a common copy of the table for everyone to use --- equivalent to
# a singleton without incurring any complexity.
PUBLIC_TABLE: PropertyTable = PropertyTable(PUBLIC_TABLE_NAME)
