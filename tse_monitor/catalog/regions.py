"""Brazilian federative units accepted by the results portal."""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence


@dataclass(frozen=True)
class Region:
    """A first-level subdivision (state) and its two-letter code."""
    display_name: str
    code: str

    def matches(self, identifier: str) -> bool:
        key = identifier.strip().lower()
        return key == self.code.lower() or key == self.display_name.lower()


BRAZILIAN_STATES = (
    Region('Acre', 'AC'),
    Region('Alagoas', 'AL'),
    Region('Amapá', 'AP'),
    Region('Amazonas', 'AM'),
    Region('Bahia', 'BA'),
    Region('Ceará', 'CE'),
    Region('Espírito Santo', 'ES'),
    Region('Goiás', 'GO'),
    Region('Maranhão', 'MA'),
    Region('Mato Grosso', 'MT'),
    Region('Mato Grosso do Sul', 'MS'),
    Region('Minas Gerais', 'MG'),
    Region('Paraná', 'PR'),
    Region('Paraíba', 'PB'),
    Region('Pará', 'PA'),
    Region('Pernambuco', 'PE'),
    Region('Piauí', 'PI'),
    Region('Rio de Janeiro', 'RJ'),
    Region('Rio Grande do Norte', 'RN'),
    Region('Rio Grande do Sul', 'RS'),
    Region('Rondônia', 'RO'),
    Region('Roraima', 'RR'),
    Region('Santa Catarina', 'SC'),
    Region('Sergipe', 'SE'),
    Region('São Paulo', 'SP'),
    Region('Tocantins', 'TO'),
)


class LocationCatalog:
    """
    Fixed, ordered list of regions used to validate user input.

    Lookups are case-insensitive exact matches on code or display name.
    """

    def __init__(self, regions: Sequence[Region] = BRAZILIAN_STATES):
        codes = [region.code.upper() for region in regions]
        if len(codes) != len(set(codes)):
            raise ValueError("Region codes must be unique")
        self._regions = tuple(regions)

    def find(self, identifier: str) -> Optional[Region]:
        if not identifier:
            return None
        for region in self._regions:
            if region.matches(identifier):
                return region
        return None

    def codes(self) -> List[str]:
        return [region.code for region in self._regions]

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)
