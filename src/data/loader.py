"""
Loading of group definitions.

Group files are JSON objects mapping a group id to its teams:

    {"A": [{"Team": "Canada", "ISOCode": "CAN", "FIBARanking": 7}, ...], ...}

Descriptors are validated with pydantic; ranking bounds are checked later by
the rating model when teams are created.
"""
import json
from pathlib import Path
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


DEFAULT_GROUPS_PATH = Path(__file__).parent.parent.parent / "data" / "groups.json"


class TeamDescriptor(BaseModel):
    """A team as listed in a group definition."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(alias="Team", min_length=1)
    code: str = Field(alias="ISOCode", min_length=3, max_length=3)
    ranking: int = Field(alias="FIBARanking", strict=True)


GroupDefinitions = Dict[str, List[TeamDescriptor]]

_groups_adapter = TypeAdapter(GroupDefinitions)


def parse_groups(data: dict) -> GroupDefinitions:
    """
    Validate raw group data.

    Args:
        data: Mapping of group id to list of team dicts

    Returns:
        Mapping of group id to TeamDescriptor list, in input order

    Raises:
        pydantic.ValidationError: If the structure or a field is invalid
        ValueError: If a team name or code appears more than once
    """
    groups = _groups_adapter.validate_python(data)

    names, codes = set(), set()
    for group, teams in groups.items():
        for team in teams:
            if team.name in names:
                raise ValueError(f"Duplicate team '{team.name}' in group {group}")
            if team.code in codes:
                raise ValueError(f"Duplicate code '{team.code}' in group {group}")
            names.add(team.name)
            codes.add(team.code)

    return groups


def load_groups(path: Union[str, Path] = DEFAULT_GROUPS_PATH) -> GroupDefinitions:
    """Load and validate group definitions from a JSON file."""
    with open(path, "r") as f:
        data = json.load(f)
    return parse_groups(data)
