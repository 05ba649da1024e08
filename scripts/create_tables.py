import asyncio
import logging

from dotenv import load_dotenv

# Load the .env file before the application modules read their settings.
load_dotenv()

from discography.services.database import engine
from discography.services.bootstrap import init_models

logging.basicConfig(level=logging.INFO)

async def create_all_tables():
    """Connects to the database and creates all tables for the album, track and artist models."""
    print("Connecting to the database to create tables...")
    await init_models(engine)
    print(" All tables created successfully!")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(create_all_tables())
