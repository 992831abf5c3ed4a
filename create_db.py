# create_db.py
import asyncio
from shared.db import engine, init_models


async def main():
    print("🔧 Creating tables...")
    await init_models()
    await engine.dispose()
    print("✅ Tables created.")

if __name__ == "__main__":
    asyncio.run(main())
