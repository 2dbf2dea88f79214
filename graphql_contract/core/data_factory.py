"""
Lightweight test data factory
Generates unique, clearly-marked inputs for users and albums, plus the fixed
input variants the soft-fail scenarios iterate over
"""

import random
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from faker import Faker

from graphql_contract.config import ContractTestConfig, get_config
from graphql_contract.models import CreateAlbumInput, CreateUserInput

INVALID_EMAILS = [
    "invalid-email",
    "test@",
    "@example.com",
    "test..test@example.com",
    "",
]

INCOMPLETE_USER_INPUTS: List[Dict[str, Any]] = [
    {"name": "Test User"},
    {"username": "testuser"},
    {"email": "test@example.com"},
    {},
]

INCOMPLETE_ALBUM_INPUTS: List[Dict[str, Any]] = [
    {"title": "Album without user"},
    {"userId": "1"},
    {},
]

BLANK_TITLES = ["", "   ", "\t", "\n"]

SPECIAL_TITLES = [
    "Album with Numbers 123",
    "Album with Special Chars: !@#$%",
    "Album with Émojis 🎵🎶",
    "Very Long Album Title That Goes On And On And Should Still Be Accepted",
    "Album-with-dashes_and_underscores",
]

SPECIAL_NAME = "Test User with Special Chars: !@#$%^&*()"

UNICODE_NAME = "用户测试 🌟 Niño José François Müller"

SPECIAL_DATABASE_TITLE = "Album with 'quotes' and \"double quotes\" and \\backslashes"

LONG_TEXT = "A" * 1000


@dataclass
class UniqueTestData:
    """One test's worth of unique identifiers"""
    user_id: int
    user_name: str
    user_email: str
    album_title: str
    album_id: int


class DataFactory:
    """Lightweight test data generator"""

    def __init__(self, config: Optional[ContractTestConfig] = None, seed: Optional[int] = None):
        self.config = config or get_config()
        self.fake = Faker()
        self._random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
        self.created_ids: Dict[str, List[str]] = {}
        self._counter = 0

    def track(self, entity_type: str, id_value: Any):
        """Track created id for cleanup"""
        if entity_type not in self.created_ids:
            self.created_ids[entity_type] = []
        self.created_ids[entity_type].append(str(id_value))

    def tracked(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self.created_ids.items()}

    def forget(self, entity_type: str, id_value: Any):
        ids = self.created_ids.get(entity_type, [])
        if str(id_value) in ids:
            ids.remove(str(id_value))

    def uid(self) -> int:
        return self._random.randint(0, 99999)

    def _stamp(self) -> str:
        # Millisecond timestamp plus a per-factory counter keeps values unique within one run
        self._counter += 1
        return f"{int(time.time() * 1000)}{self._counter:03d}"

    def generate_unique_test_data(self) -> UniqueTestData:
        stamp = self._stamp()
        return UniqueTestData(
            user_id=self._random.randint(0, 9999),
            user_name=f"testuser_{stamp}",
            user_email=f"test_{stamp}@example.com",
            album_title=f"Test Album {stamp}",
            album_id=self._random.randint(0, 9999),
        )

    def user_input(self, **overrides) -> Dict[str, Any]:
        """Full CreateUserInput variables"""
        stamp = self._stamp()
        data = {
            "name": f"{self.fake.name()} {stamp}",
            "username": f"{self.config.test_data_prefix}_{stamp}",
            "email": f"{self.config.test_data_prefix}.{stamp}@example.com",
            "phone": self.fake.numerify("###-###-####"),
            "website": f"https://{self.fake.domain_name()}",
        }
        data.update(overrides)
        return CreateUserInput(**data).to_variables()

    def minimal_user_input(self, **overrides) -> Dict[str, Any]:
        stamp = self._stamp()
        data = {
            "name": f"Minimal User {stamp}",
            "username": f"minimal_{self.config.test_data_prefix}_{stamp}",
            "email": f"minimal_{stamp}@example.com",
        }
        data.update(overrides)
        return CreateUserInput(**data).to_variables()

    def album_input(self, user_id: Optional[str] = None, **overrides) -> Dict[str, Any]:
        """Full CreateAlbumInput variables"""
        data = {
            "title": f"{self.config.test_data_prefix} {self.fake.catch_phrase()} {self._stamp()}",
            "userId": str(user_id or self.config.seeded_user_id),
        }
        data.update(overrides)
        return CreateAlbumInput(**data).to_variables()
