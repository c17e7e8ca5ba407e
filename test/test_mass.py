from chemmass.mass import ATOMIC_MASS, relative_atomic_mass

def test_textbook_values():
    assert relative_atomic_mass('H') == 1.
    assert relative_atomic_mass('C') == 12.
    assert relative_atomic_mass('O') == 16.
    assert relative_atomic_mass('Na') == 23.
    assert relative_atomic_mass('Cl') == 35.5
    assert relative_atomic_mass('Fe') == 56.
    assert relative_atomic_mass('U') == 238.

def test_unknown_symbol():
    assert relative_atomic_mass('Xx') == 0.
    assert relative_atomic_mass('') == 0.
    # symbols are case sensitive
    assert relative_atomic_mass('fe') == 0.
    assert relative_atomic_mass('FE') == 0.

def test_table_coverage():
    assert len(ATOMIC_MASS) == 118
    for symbol in ('Nh', 'Mc', 'Ts', 'Og'):
        assert symbol in ATOMIC_MASS
    # heavy elements are in atomic number order
    assert ATOMIC_MASS['Np'] < ATOMIC_MASS['Pu']
    assert all(mass > 0 for mass in ATOMIC_MASS.values())

def test_table_is_read_only():
    try:
        ATOMIC_MASS['Xx'] = 1.  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("mass table should not accept new entries")
    assert 'Xx' not in ATOMIC_MASS
