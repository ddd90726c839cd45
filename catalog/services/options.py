# catalog/services/options.py
import logging
from typing import Callable, Dict, Iterable, List, Mapping

from catalog.errors import UnknownEntityKind
from catalog.models import SelectOption, SelectOptions

logger = logging.getLogger(__name__)

SelectProducer = Callable[[], List[SelectOption]]

# Choice lists needed by each entity's create/edit form
FORM_OPTIONS: Dict[str, List[str]] = {
    'books': ['authors', 'publishers', 'genres', 'courses'],
    'authors': ['nationalities', 'genres'],
    'publishers': ['nationalities', 'genres'],
    'students': ['faculties'],
    'reservations': ['books', 'students'],
}


class OptionAggregator:
    """Combines several select views into one response for a form."""

    def __init__(self, producers: Mapping[str, SelectProducer]):
        self.producers = producers

    def aggregate(self, names: Iterable[str]) -> SelectOptions:
        """Run each named producer in order.

        ``present`` is True as soon as any one list has entries. A
        DataIntegrityError raised by a producer is not caught.
        """
        names = list(names)
        for name in names:
            if name not in self.producers:
                raise UnknownEntityKind(name)

        options = {name: list(self.producers[name]()) for name in names}
        present = any(options.values())
        logger.debug(f"Select options for {names}: {[len(v) for v in options.values()]} (present={present})")
        return SelectOptions(options=options, present=present)
