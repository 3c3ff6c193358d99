"""Catalog seeder for the sample API listings and the demo user.

Listings are matched by name and the demo user by email; existing rows
are left untouched. A freshly inserted featured listing gets one review
from the demo user so ratings show up on first start.
"""

from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from apihub.infrastructure.persistence.models import ApiModel, ReviewModel, UserModel

logger = structlog.get_logger(__name__)

DEMO_USER = {"email": "demo@apihub.dev", "name": "Demo User"}

SAMPLE_REVIEW = "Great API for testing! Works perfectly for my projects."

SAMPLE_APIS = [
    {
        "name": "JSONPlaceholder",
        "description": "Fake Online REST API for testing and prototyping. Free fake "
        "data whenever you need it.",
        "base_url": "https://jsonplaceholder.typicode.com",
        "category": "Development",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Unknown",
        "https": True,
        "featured": True,
    },
    {
        "name": "Cat Facts",
        "description": "Random cat facts to display on your website or app.",
        "base_url": "https://catfact.ninja",
        "category": "Animals",
        "auth_type": "Api Key",
        "rate_limit": "500/day",
        "cors_policy": "Unknown",
        "https": True,
        "featured": True,
    },
    {
        "name": "PokeAPI",
        "description": "RESTful Pokemon API. All the Pokemon data you'll ever need "
        "in one place.",
        "base_url": "https://pokeapi.co/api/v2",
        "category": "Gaming",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Yes",
        "https": True,
        "featured": True,
    },
    {
        "name": "Rick and Morty",
        "description": "Characters, locations and episodes of Rick and Morty.",
        "base_url": "https://rickandmortyapi.com/api",
        "category": "Entertainment",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Yes",
        "https": True,
        "featured": True,
    },
    {
        "name": "Random User Generator",
        "description": "Random users with names, photos and addresses for testing.",
        "base_url": "https://randomuser.me/api",
        "category": "Testing",
        "auth_type": "None",
        "rate_limit": "1000/day",
        "cors_policy": "Unknown",
        "https": True,
        "featured": True,
    },
    {
        "name": "Numbers API",
        "description": "Interesting facts about numbers, math, dates and years.",
        "base_url": "http://numbersapi.com",
        "category": "Science",
        "auth_type": "None",
        "rate_limit": "100/hour",
        "cors_policy": "Unknown",
        "https": False,
        "featured": False,
    },
    {
        "name": "Dog CEO",
        "description": "Random dog images and breeds from the Dog CEO database.",
        "base_url": "https://dog.ceo/api",
        "category": "Animals",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Yes",
        "https": True,
        "featured": False,
    },
    {
        "name": "Brewery DB",
        "description": "Breweries, beer styles and ingredients.",
        "base_url": "https://api.openbrewerydb.org",
        "category": "Food & Drink",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Yes",
        "https": True,
        "featured": False,
    },
    {
        "name": "CoinGecko",
        "description": "Current and historical cryptocurrency data.",
        "base_url": "https://api.coingecko.com/api/v3",
        "category": "Finance",
        "auth_type": "None",
        "rate_limit": "10-50/minute",
        "cors_policy": "Yes",
        "https": True,
        "featured": True,
    },
    {
        "name": "Open Trivia Database",
        "description": "Trivia questions and answers from various categories.",
        "base_url": "https://opentdb.com/api.php",
        "category": "Education",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Unknown",
        "https": True,
        "featured": False,
    },
    {
        "name": "SpaceX",
        "description": "Launches, rockets and more from the SpaceX REST API.",
        "base_url": "https://api.spacexdata.com/v4",
        "category": "Science",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Yes",
        "https": True,
        "featured": True,
    },
    {
        "name": "Zippopotam.us",
        "description": "Convert zip codes to location data.",
        "base_url": "https://api.zippopotam.us",
        "category": "Geocoding",
        "auth_type": "None",
        "rate_limit": "Unlimited",
        "cors_policy": "Unknown",
        "https": True,
        "featured": False,
    },
]


async def seed_demo_user(session: AsyncSession) -> UUID:
    """Ensure the demo user exists.

    Args:
        session: Async database session.

    Returns:
        UUID: Id of the (new or existing) demo user.
    """
    existing = await session.scalar(
        select(UserModel.id).where(UserModel.email == DEMO_USER["email"])
    )
    if existing is not None:
        logger.debug("demo_user_exists", email=DEMO_USER["email"])
        return existing

    user = UserModel(id=uuid7(), **DEMO_USER)
    session.add(user)
    await session.flush()
    logger.info("demo_user_seeded", id=str(user.id))
    return user.id


async def seed_catalog(session: AsyncSession, *, reviewer_id: UUID) -> None:
    """Seed the sample listings. Idempotent via name check.

    Args:
        session: Async database session.
        reviewer_id: Author of the sample reviews.
    """
    seeded_count = 0
    skipped_count = 0

    for api_data in SAMPLE_APIS:
        name = api_data["name"]
        existing = await session.scalar(select(ApiModel.id).where(ApiModel.name == name))
        if existing is not None:
            skipped_count += 1
            logger.debug("api_exists", name=name)
            continue

        api = ApiModel(id=uuid7(), **api_data)
        session.add(api)
        await session.flush()

        if api.featured:
            session.add(
                ReviewModel(
                    id=uuid7(),
                    api_id=api.id,
                    user_id=reviewer_id,
                    rating=5 if seeded_count % 2 == 0 else 4,
                    content=SAMPLE_REVIEW,
                )
            )

        seeded_count += 1
        logger.info("api_seeded", name=name, id=str(api.id))

    await session.flush()
    logger.info(
        "catalog_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(SAMPLE_APIS),
    )
