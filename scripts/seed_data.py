import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

from discography.services.database import engine, SessionLocal
from discography.services.bootstrap import bootstrap

logging.basicConfig(level=logging.INFO)

async def create_demo_data():
    seeded = await bootstrap(engine, SessionLocal)
    if seeded:
        print("✅ Demo data created successfully!")
    else:
        print("Albums already exist, nothing to seed.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(create_demo_data())
