# This program is public domain
"""
Element property dataset.

The dataset is an XML export of the PubChem periodic table, *elements.xml*,
with one ``<Row>`` per element in atomic number order and one ``<Cell>``
per column::

    <Table>
      <Row><Cell>1</Cell><Cell>H</Cell><Cell>Hydrogen</Cell>...</Row>
      ...
    </Table>

The columns are the atomic number followed by the :class:`Keyword
<chemmass.core.Keyword>` columns.  Cells are kept as text; conversion to
numbers happens on lookup.

The file is checked as it is loaded, so a missing or damaged dataset raises
:class:`DatasetError <chemmass.core.DatasetError>` the first time the table
is used rather than giving wrong answers later.
"""

import logging
import os
from xml.etree import ElementTree

from .core import DatasetError, ElementRow, PropertyTable, ROW_WIDTH, get_data_path

logger = logging.getLogger(__name__)

DATASET_FILE = 'elements.xml'

def init(table: PropertyTable, reload: bool=False, path: str|None=None) -> None:
    """
    Load the element rows into *table*.

    The rows are read from *path* if given, otherwise from *elements.xml*
    in the data directory.  Nothing happens if the table is already loaded
    unless *reload* is True.
    """
    if 'rows' in table.properties and not reload:
        return
    if path is None:
        path = os.path.join(get_data_path('.'), DATASET_FILE)
    table.rows = load(path)
    if 'rows' not in table.properties:
        table.properties.append('rows')

def load(path: str) -> tuple[ElementRow, ...]:
    """
    Parse the dataset at *path* into a tuple of element rows.

    :Raises:
        *DatasetError* if the file cannot be read or parsed, or if a row does
        not have the expected number of cells or is out of sequence.
    """
    try:
        tree = ElementTree.parse(path)
    except (OSError, ElementTree.ParseError) as exc:
        logger.error("could not read element dataset %s: %s", path, exc)
        raise DatasetError("could not read element dataset %s: %s"%(path, exc)) from exc

    rows = []
    for Z, node in enumerate(tree.getroot().iter('Row'), start=1):
        cells = tuple((cell.text or '').strip() for cell in node.findall('Cell'))
        if len(cells) != ROW_WIDTH:
            msg = "row %d of %s has %d cells; expected %d"%(Z, path, len(cells), ROW_WIDTH)
        elif cells[0] != str(Z):
            msg = "row %d of %s is for atomic number %r"%(Z, path, cells[0])
        else:
            rows.append(ElementRow(cells))
            continue
        logger.error(msg)
        raise DatasetError(msg)

    logger.debug("loaded %d element rows from %s", len(rows), path)
    return tuple(rows)
