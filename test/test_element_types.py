import chemmass
from chemmass.core import ElementRow, Keyword, PropertyTable
from chemmass.formulas import Formula

# Test table access
table: PropertyTable = chemmass.elements
hydrogen: ElementRow = chemmass.elements[1]
iron: ElementRow = chemmass.elements.symbol("Fe")
uranium: ElementRow = chemmass.elements.name("uranium")

# Test that we can access row properties
number: int = iron.number
symbol: str = iron.symbol
name: str = uranium.name
density: str = iron[Keyword.Density]

# Test typed lookups
mass: float = chemmass.relative_atomic_mass("C")
year: int|None = chemmass.get_property_int(1, Keyword.YearDiscovered)
melting: float|None = chemmass.get_property_float(26, "MeltingPoint")

# Test lazy formula symbols
water: Formula = chemmass.formula("H2O")
molar_mass: float = chemmass.calculate_molar_mass("H2O")

assert isinstance(hydrogen, tuple)
assert uranium.number == 92
assert isinstance(water, Formula)
assert year == 1766
