"""Database connection management, schema and seed data.

Every request opens its own connection through ``create_connection`` and
closes it when done. Schema creation and seeding run once from the
application lifespan.
"""
import sqlite3
from datetime import date

import structlog

from . import config
from .infrastructure.repositories import AnimalRepository

DATABASE_PATH = config.DATABASE_PATH

logger = structlog.get_logger(__name__)


# =============================================================================
# SQLite3 date adapter (Python 3.12 compatibility)
# =============================================================================
def _adapt_date(value: date) -> str:
    """Adapt date to ISO 8601 string for SQLite."""
    return value.isoformat()

def _convert_date(val: bytes) -> date:
    """Convert ISO 8601 string from SQLite to date."""
    return date.fromisoformat(val.decode())

sqlite3.register_adapter(date, _adapt_date)
sqlite3.register_converter("DATE", _convert_date)


# =============================================================================
# Database Connection
# =============================================================================
def create_connection() -> sqlite3.Connection:
    """Open a new database connection with row factory and FK enforcement.

    Callers own the connection and must close it.
    """
    conn = sqlite3.connect(
        DATABASE_PATH,
        detect_types=sqlite3.PARSE_DECLTYPES,
        check_same_thread=False
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


# =============================================================================
# Database Initialization
# =============================================================================
def init_db():
    """Initialize database with schema."""
    db = create_connection()
    try:
        db.execute("""
            CREATE TABLE IF NOT EXISTS animals (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                avatar_url TEXT NOT NULL,
                description TEXT NOT NULL,
                rescue_date DATE NOT NULL
            )
        """)

        # Requests are displayed in id order, which is creation order
        db.execute("""
            CREATE TABLE IF NOT EXISTS adoption_requests (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                animal_id INTEGER NOT NULL,
                adopter_name TEXT NOT NULL,
                email TEXT NOT NULL,
                notes TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (animal_id) REFERENCES animals(id) ON DELETE CASCADE
            )
        """)

        db.execute(
            "CREATE INDEX IF NOT EXISTS idx_adoption_requests_animal ON adoption_requests(animal_id)"
        )
        db.commit()
    finally:
        db.close()


# =============================================================================
# Seed Data
# =============================================================================
SEED_ANIMALS = [
    ("Chocobo", "/images/chocobo.jpg",
     "A cheerful yellow lab mix who loves long walks and chasing tennis balls.", date(2020, 1, 2)),
    ("Bella", "/images/bella.jpg",
     "Gentle senior beagle, house trained and great with kids.", date(2020, 2, 14)),
    ("Max", "/images/max.jpg",
     "Energetic border collie looking for an active family with a yard.", date(2020, 3, 8)),
    ("Luna", "/images/luna.jpg",
     "Shy tabby cat who warms up quickly once she trusts you.", date(2020, 4, 21)),
    ("Charlie", "/images/charlie.jpg",
     "Playful terrier mix, knows sit, stay and shake.", date(2020, 5, 3)),
    ("Daisy", "/images/daisy.jpg",
     "Calm greyhound retired from racing, loves naps on the couch.", date(2020, 6, 17)),
    ("Rocky", "/images/rocky.jpg",
     "Sturdy boxer with a big heart, best as the only dog.", date(2020, 7, 29)),
    ("Milo", "/images/milo.jpg",
     "Curious orange kitten, litter trained and very vocal.", date(2020, 8, 11)),
    ("Coco", "/images/coco.jpg",
     "Sweet poodle mix, hypoallergenic coat, enjoys grooming.", date(2020, 9, 5)),
    ("Oreo", "/images/oreo.jpg",
     "Black and white rabbit who loves leafy greens and cardboard tunnels.", date(2020, 10, 30)),
]

# (animal index, adopter, email, notes); animal index 0 is Chocobo
SEED_ADOPTION_REQUESTS = [
    (0, "alice", "alice@example.com", "We have a big backyard and another friendly lab."),
    (0, "bob", "bob@example.com", "I work from home and can take Chocobo on daily hikes."),
    (0, "carol", "carol@example.com", "Looking for a running buddy, lots of experience with labs."),
    (3, "alice", "alice@example.com", "Quiet apartment, no other pets."),
]


def seed_db() -> bool:
    """Populate the animal catalogue if it is empty.

    Returns:
        True if seed data was inserted
    """
    db = create_connection()
    try:
        # Holds the write lock from the emptiness check to commit, so
        # workers starting together seed exactly once
        db.execute("BEGIN IMMEDIATE")
        if AnimalRepository(db).count():
            db.rollback()
            return False

        animal_ids = []
        for name, avatar_url, description, rescue_date in SEED_ANIMALS:
            cursor = db.execute(
                """INSERT INTO animals (name, avatar_url, description, rescue_date)
                   VALUES (?, ?, ?, ?)""",
                (name, avatar_url, description, rescue_date)
            )
            animal_ids.append(cursor.lastrowid)

        for index, adopter_name, email, notes in SEED_ADOPTION_REQUESTS:
            db.execute(
                """INSERT INTO adoption_requests (animal_id, adopter_name, email, notes)
                   VALUES (?, ?, ?, ?)""",
                (animal_ids[index], adopter_name, email, notes)
            )

        db.commit()
        logger.info(
            "database_seeded",
            animals=len(SEED_ANIMALS),
            adoption_requests=len(SEED_ADOPTION_REQUESTS)
        )
        return True
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
