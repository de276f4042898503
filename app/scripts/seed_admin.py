"""
Seed script to create the first admin user and print a bearer token for it
"""
import asyncio
from datetime import datetime

from app.config.database import db_config, Collections
from app.models.user import UserCreate
from app.utils.auth import hash_password, create_access_token

DEFAULT_ADMIN = UserCreate(
    username="admin",
    email="admin@hotellistings.com",
    role="admin",
    password="admin123",  # Default password
)

async def seed_first_admin():
    """Create the first admin user"""
    await db_config.connect_db()
    users_collection = db_config.get_collection(Collections.USERS)

    print("🌱 Seeding first admin user...")

    admin = await users_collection.find_one({"username": DEFAULT_ADMIN.username})
    if admin:
        print("⚠️  Admin user already exists. Skipping creation...")
    else:
        admin_doc = DEFAULT_ADMIN.model_dump()
        admin_doc["password"] = hash_password(DEFAULT_ADMIN.password)
        admin_doc["createdAt"] = datetime.utcnow()
        result = await users_collection.insert_one(admin_doc)
        admin = {**admin_doc, "_id": result.inserted_id}
        print(f"✅ Created admin user: {admin['username']}")
        print(f"   Email: {admin['email']}")
        print(f"   Password: {DEFAULT_ADMIN.password}")
        print("⚠️  IMPORTANT: Change the default password after first login!")

    token = create_access_token({"sub": str(admin["_id"]), "role": admin["role"]})
    print(f"\n🔑 Bearer token (id header: {admin['_id']}):\n{token}")

    await db_config.close_db()

if __name__ == "__main__":
    asyncio.run(seed_first_admin())
