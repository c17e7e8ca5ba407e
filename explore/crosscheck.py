"""
Compare the formula mass table against the AtomicMass column of the element
property dataset.

The two tables come from different sources: the formula masses are rounded
textbook values while the dataset carries the PubChem standard atomic
weights.  Every element should agree to within one mass unit.

Usage::

    $ python explore/crosscheck.py [--tolerance 1.0] [--show-table]
"""

def compare(tolerance=1.0):
    """
    Return (Z, symbol, dataset mass, table mass) for each element whose
    masses differ by more than *tolerance*.  Elements missing from the mass
    table are always reported.
    """
    import numpy as np
    from chemmass import elements, get_property_float, ATOMIC_MASS

    Z = np.array([row.number for row in elements])
    symbols = [row.symbol for row in elements]
    dataset = np.array([get_property_float(z, 'AtomicMass') for z in Z], dtype=float)
    table = np.array([ATOMIC_MASS.get(s, np.nan) for s in symbols], dtype=float)

    bad = ~np.isclose(dataset, table, rtol=0, atol=tolerance)
    return [(int(z), s, d, t)
            for z, s, d, t, b in zip(Z, symbols, dataset, table, bad) if b]

def main():
    import argparse

    import numpy as np
    from chemmass import elements, ATOMIC_MASS, Keyword

    parser = argparse.ArgumentParser(description=__doc__.split('\n\n')[0])
    parser.add_argument('--tolerance', type=float, default=1.0,
                        help='Allowed difference in mass units (default: 1.0)')
    parser.add_argument('--show-table', action='store_true',
                        help='Print the mass table rounded from the dataset')
    args = parser.parse_args()

    if args.show_table:
        # Regenerate the body of the mass table from the dataset values.
        print("_atomic_mass = {")
        for row in elements:
            value = float(np.floor(float(row[Keyword.AtomicMass]) + 0.5))
            print(f"    '{row.symbol}': {value},")
        print("}")
        return

    mismatches = compare(args.tolerance)
    for z, symbol, dataset, table in mismatches:
        print(f"{z:3d} {symbol:<2s}: dataset {dataset:10.4f} != table {table:8.2f}")

    extra = set(ATOMIC_MASS) - {row.symbol for row in elements}
    if extra:
        print("Symbols in the mass table but not in the dataset:", " ".join(sorted(extra)))
    print(f"There are {len(elements)} elements in the dataset and {len(ATOMIC_MASS)} "
          f"in the mass table; {len(mismatches)} differ by more than {args.tolerance}.")


if __name__ == "__main__":
    main()
