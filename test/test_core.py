import pytest

from chemmass import (
    elements, get_property, get_property_int, get_property_float,
    get_property_double, relative_atomic_mass,
    Keyword, ElementRow, UnknownKeywordError, UnknownElementError,
    PropertyParseError)

def test_get_property():
    assert get_property(1, 'Symbol') == 'H'
    assert get_property(1, 'Name') == 'Hydrogen'
    assert get_property(26, 'Symbol') == 'Fe'
    assert get_property(26, 'GroupBlock') == 'Transition metal'
    assert get_property(8, 'StandardState') == 'Gas'
    assert get_property(118, 'Name') == 'Oganesson'

def test_keyword_member():
    assert get_property(1, Keyword.Name) == 'Hydrogen'
    assert Keyword.lookup('Density') is Keyword.Density
    assert Keyword.lookup(Keyword.Density) is Keyword.Density
    assert [k.value for k in Keyword] == list(range(1, 17))

def test_unknown_keyword():
    for Z in (1, 26, 118):
        with pytest.raises(UnknownKeywordError) as info:
            get_property(Z, 'UnknownKeyword')
        assert info.value.keyword == 'UnknownKeyword'
        assert 'UnknownKeyword' in str(info.value)
    # keywords are case sensitive
    with pytest.raises(UnknownKeywordError):
        get_property(1, 'symbol')
    # the atomic number column is not a keyword
    with pytest.raises(UnknownKeywordError):
        get_property(1, 'AtomicNumber')
    # usable as either a KeyError or a ValueError
    with pytest.raises(KeyError):
        get_property(1, 'Colour')
    with pytest.raises(ValueError):
        get_property_float(1, 'Colour')

def test_not_found():
    assert get_property(999999, 'Symbol') is None
    assert get_property(119, 'Symbol') is None
    assert get_property(0, 'Symbol') is None
    assert get_property(-1, 'Symbol') is None
    assert get_property_int(999999, 'YearDiscovered') is None
    assert get_property_float(999999, 'AtomicMass') is None
    # keyword errors are reported even when the element is missing
    with pytest.raises(UnknownKeywordError):
        get_property(999999, 'UnknownKeyword')

def test_empty_cell():
    # helium has no electronegativity
    assert get_property(2, 'Electronegativity') == ''
    assert get_property_float(2, 'Electronegativity') is None

def test_typed_property():
    assert get_property_int(1, 'YearDiscovered') == 1766
    assert get_property_int(118, 'YearDiscovered') == 2006
    assert get_property_float(26, 'Density') == 7.874
    assert get_property_float(1, 'AtomicMass') == pytest.approx(1.008)
    assert get_property_double(26, 'Density') == 7.874
    # zero is a legitimate value, distinct from missing
    assert get_property_int(2, 'OxidationStates') == 0

def test_typed_property_parse_error():
    # carbon was known in antiquity
    with pytest.raises(PropertyParseError) as info:
        get_property_int(6, 'YearDiscovered')
    assert 'Ancient' in str(info.value)
    assert 'YearDiscovered' in str(info.value)
    with pytest.raises(PropertyParseError):
        get_property_float(1, 'Symbol')
    with pytest.raises(PropertyParseError):
        get_property_int(26, 'Density')

def test_table():
    assert len(elements) == 118
    assert [row.number for row in elements] == list(range(1, 119))
    row = elements[26]
    assert isinstance(row, ElementRow)
    assert len(row) == 17
    assert row.symbol == 'Fe'
    assert row.name == 'Iron'
    assert row[Keyword.Density] == '7.874'
    assert repr(row) == 'ElementRow(26, Fe)'
    assert elements.get(0) is None
    with pytest.raises(KeyError):
        elements[119]

def test_lookup_by_symbol_and_name():
    assert elements.symbol('Fe').number == 26
    assert elements.name('iron').number == 26
    assert elements.name('Iron').number == 26
    with pytest.raises(UnknownElementError):
        elements.symbol('Xx')
    with pytest.raises(UnknownElementError):
        elements.name('unobtainium')

def test_masses_agree():
    # The dataset and the mass table are independent sources.
    for row in elements:
        dataset_mass = get_property_float(row.number, 'AtomicMass')
        assert dataset_mass == pytest.approx(relative_atomic_mass(row.symbol), abs=1.0), row
