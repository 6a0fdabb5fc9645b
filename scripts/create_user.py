import argparse
import asyncio
import secrets
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database.base import async_session_factory, init_db
from database.models.user import User, UserRole
from sqlalchemy import select


async def create_user(username: str, admin: bool = False):
    """Создать пользователя и выдать ему токен API"""
    await init_db()

    async with async_session_factory() as session:
        result = await session.execute(
            select(User).where(User.username == username)
        )
        if result.scalar_one_or_none():
            print(f"❌ Пользователь {username} уже существует")
            return

        user = User(
            username=username,
            api_token=secrets.token_hex(32),
            role=UserRole.ADMIN if admin else UserRole.CLIENT,
        )
        session.add(user)
        await session.commit()

        print(f"✅ Пользователь {username} создан (ID: {user.id}, роль: {user.role.value})")
        print(f"🔑 Токен для заголовка x-auth-token: {user.api_token}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Создать пользователя API")
    parser.add_argument("username")
    parser.add_argument("--admin", action="store_true", help="Назначить роль администратора")
    args = parser.parse_args()

    asyncio.run(create_user(args.username, admin=args.admin))
