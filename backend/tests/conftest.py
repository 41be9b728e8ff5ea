"""Root conftest — shared test configuration, async DB and seeded catalogue.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Tests never reach a real database (DATABASE_URL forced to SQLite)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for read-only queries
    - StaticPool: one connection shared by the seeding session and the app session,
      otherwise each connection would see its own empty :memory: database
"""

import os
import uuid

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.models import (  # noqa: E402
    Alias, Area, Author, AuthorType, Edition, Gender, Identifier,
    IdentifierType, Language, Relationship, RelationshipType, Work,
)
from tests.api.catalogue import (  # noqa: E402
    AUTHOR_REL_TYPE_ID, EDITION_BBID, EDITION_REL_TYPE_ID, GROUP_BBID,
    LONELY_AUTHOR_BBID, PERSON_BBID, TRANSLATOR_REL_TYPE_ID, WORK_BBID,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
        connect_args={"check_same_thread": False}, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_catalogue(test_db):
    """Insert a small catalogue: one work with a Person and a Group author.

    Relationships (by id):
        1: Person  -[Author]->      Work
        2: Group   -[Author]->      Work
        3: Person  -[Translator]->  Work
        4: Work    -[Edition]->     Edition
    """
    english = Language(id=1, name="English", iso_code_3="eng")
    german = Language(id=2, name="German", iso_code_3="deu")
    usa = Area(id=1, name="United States")
    male = Gender(id=1, name="Male")
    person = AuthorType(id=1, label="Person")
    group = AuthorType(id=2, label="Group")
    wikidata = IdentifierType(id=1, label="Wikidata ID", entity_type="Author")
    isni = IdentifierType(id=2, label="ISNI", entity_type="Author")
    test_db.add_all([english, german, usa, male, person, group, wikidata, isni])
    test_db.add_all([
        RelationshipType(
            id=AUTHOR_REL_TYPE_ID, label="Author",
            link_phrase="wrote", reverse_link_phrase="is written by",
            source_entity_type="Author", target_entity_type="Work",
        ),
        RelationshipType(
            id=TRANSLATOR_REL_TYPE_ID, label="Translator",
            link_phrase="translated", reverse_link_phrase="is translated by",
            source_entity_type="Author", target_entity_type="Work",
        ),
        RelationshipType(
            id=EDITION_REL_TYPE_ID, label="Edition",
            link_phrase="contains", reverse_link_phrase="is contained by",
            source_entity_type="Work", target_entity_type="Edition",
        ),
    ])
    await test_db.flush()

    test_db.add_all([
        Author(
            bbid=uuid.UUID(PERSON_BBID), disambiguation="science fiction writer",
            author_type_id=1, gender_id=1, begin_area_id=1, end_area_id=1,
            begin_date="1907-07-07", end_date="1988-05-08", ended=True,
        ),
        Author(bbid=uuid.UUID(GROUP_BBID), author_type_id=2, ended=False),
        Author(bbid=uuid.UUID(LONELY_AUTHOR_BBID), ended=False),
        Work(bbid=uuid.UUID(WORK_BBID)),
        Edition(bbid=uuid.UUID(EDITION_BBID)),
    ])
    await test_db.flush()

    test_db.add_all([
        Alias(
            id=1, entity_bbid=uuid.UUID(PERSON_BBID), name="Robert A. Heinlein",
            sort_name="Heinlein, Robert A.", language_id=1,
            primary=True, is_default=True,
        ),
        Alias(
            id=2, entity_bbid=uuid.UUID(PERSON_BBID), name="Anson MacDonald",
            sort_name="MacDonald, Anson", language_id=1, primary=False,
        ),
        Alias(
            id=3, entity_bbid=uuid.UUID(GROUP_BBID), name="Futurians",
            sort_name="Futurians", language_id=2, primary=True, is_default=True,
        ),
        Alias(
            id=4, entity_bbid=uuid.UUID(WORK_BBID),
            name="Stranger in a Strange Land",
            sort_name="Stranger in a Strange Land", language_id=1,
            primary=True, is_default=True,
        ),
        Identifier(
            id=1, entity_bbid=uuid.UUID(PERSON_BBID), type_id=1, value="Q123078",
        ),
        Identifier(
            id=2, entity_bbid=uuid.UUID(PERSON_BBID), type_id=2,
            value="0000000121251077",
        ),
        Relationship(
            id=1, type_id=AUTHOR_REL_TYPE_ID,
            source_bbid=uuid.UUID(PERSON_BBID), target_bbid=uuid.UUID(WORK_BBID),
        ),
        Relationship(
            id=2, type_id=AUTHOR_REL_TYPE_ID,
            source_bbid=uuid.UUID(GROUP_BBID), target_bbid=uuid.UUID(WORK_BBID),
        ),
        Relationship(
            id=3, type_id=TRANSLATOR_REL_TYPE_ID,
            source_bbid=uuid.UUID(PERSON_BBID), target_bbid=uuid.UUID(WORK_BBID),
        ),
        Relationship(
            id=4, type_id=EDITION_REL_TYPE_ID,
            source_bbid=uuid.UUID(WORK_BBID), target_bbid=uuid.UUID(EDITION_BBID),
        ),
    ])
    await test_db.commit()
