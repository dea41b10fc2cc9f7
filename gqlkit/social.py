"""An example schema with interfaces, unions and paged friends lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from gqlkit.scalars import ID

SCHEMA = """
	schema {
		query: Query
	}
	
	type Query {
		admin(id: ID!, role: Role = ADMIN): Admin!
		user(id: ID!): User!
		search(text: String!): [SearchResult]!
	}
	
	interface Admin {
		id: ID!
		name: String!
		role: Role!
	}

	interface Person {
		name: String!
	}

	scalar Time	

	type User implements Admin & Person {
		id: ID!
		name: String!
		email: String!
		role: Role!
		phone: String!
		address: [String!]
		friends(page: Pagination): [User]
		createdAt: Time!
	}

	input Pagination {
	  	first: Int
	  	last: Int
	}
	
	enum Role {
		ADMIN
		USER
	}

	union SearchResult = User
"""


@dataclass
class Page:
    first: float | None = None
    last: float | None = None


@dataclass
class Contact:
    email: str
    phone: str


@dataclass
class User:
    id_field: str
    name_field: str
    role_field: str
    contact: Contact
    address: list[str] | None = None
    friends_field: list[User] = field(default_factory=list, repr=False, compare=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def id(self) -> ID:
        return ID(self.id_field)

    def name(self) -> str:
        return self.name_field

    def role(self) -> str:
        return self.role_field

    @property
    def email(self) -> str:
        return self.contact.email

    @property
    def phone(self) -> str:
        return self.contact.phone

    def friends(self, page: Page | None = None) -> list[User]:
        """The friends list, sliced by the page's first and last positions."""
        count = len(self.friends_field)
        start, end = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                end = int(page.last)
                if end == 0 or end > count:
                    end = count
        return self.friends_field[start:end]


class AdminResolver:
    """The Admin interface over a user."""

    def __init__(self, admin: User) -> None:
        self._admin = admin

    def id(self) -> ID:
        return self._admin.id()

    def name(self) -> str:
        return self._admin.name()

    def role(self) -> str:
        return self._admin.role()

    def to_user(self) -> User | None:
        return self._admin if isinstance(self._admin, User) else None


class SearchResult:
    """The SearchResult union."""

    def __init__(self, result: object) -> None:
        self._result = result

    def to_user(self) -> User | None:
        return self._result if isinstance(self._result, User) else None


def _contact() -> Contact:
    return Contact(email="[email]", phone="[phone]")


USERS: list[User] = [
    User("0x01", "Albus Dumbledore", "ADMIN", _contact(),
         ["Office @ Hogwarts", "where Horcruxes are"]),
    User("0x02", "Harry Potter", "USER", _contact(),
         ["123 dorm room @ Hogwarts", "456 random place"]),
    User("0x03", "Hermione Granger", "USER", _contact(),
         ["233 dorm room @ Hogwarts", "786 @ random place"]),
    User("0x04", "Ronald Weasley", "USER", _contact(),
         ["411 dorm room @ Hogwarts", "981 @ random place"]),
]
USERS[0].friends_field = [USERS[1]]
USERS[1].friends_field = [USERS[0], USERS[2], USERS[3]]
USERS[2].friends_field = [USERS[1], USERS[3]]
USERS[3].friends_field = [USERS[1], USERS[2]]

USERS_BY_ID: dict[str, User] = {u.id_field: u for u in USERS}


class Resolver:
    """Root query resolver."""

    def admin(self, id: str, role: str = "ADMIN") -> AdminResolver:
        found = USERS_BY_ID.get(id)
        if found is not None and found.role_field == role:
            return AdminResolver(found)
        raise LookupError(f"user with id={id} and role={role} does not exist")

    def user(self, id: str) -> User:
        found = USERS_BY_ID.get(id)
        if found is None:
            raise LookupError(f"user with id={id} does not exist")
        return found

    def search(self, text: str) -> list[SearchResult]:
        return [SearchResult(u) for u in USERS if text in u.name_field]