"""seed_data.py: 개발용 더미 데이터 생성 스크립트.

사용법:
    source .venv/bin/activate
    python database/seed_data.py

생성되는 데이터:
    - 50 users (첫 번째 사용자는 ADMIN)
    - 200 adverts
    - 1,000 comments
"""

import asyncio
import random
from datetime import datetime, timedelta
from faker import Faker

# 프로젝트 루트를 PYTHONPATH에 추가
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from database.connection import init_db, close_db, transactional
from models import advert_models, comment_models, user_models
from models.advert_models import Advert
from models.comment_models import Comment
from models.user_models import ROLE_ADMIN, ROLE_USER, User

fake = Faker("ko_KR")
Faker.seed(42)  # 재현 가능한 데이터
random.seed(42)

NUM_USERS = 50
NUM_ADVERTS = 200
NUM_COMMENTS = 1000


async def clear_existing_data() -> None:
    """기존 데이터 삭제 (개발 환경 전용)."""
    print("Clearing existing data...")
    async with transactional() as cur:
        await cur.execute("SET FOREIGN_KEY_CHECKS = 0")
        await cur.execute("TRUNCATE TABLE comment")
        await cur.execute("TRUNCATE TABLE advert")
        await cur.execute("TRUNCATE TABLE user")
        await cur.execute("SET FOREIGN_KEY_CHECKS = 1")


async def seed_users() -> list[User]:
    print(f"Seeding {NUM_USERS} users...")
    users = []
    for i in range(NUM_USERS):
        user = User(
            id=None,
            email=f"user{i}@{fake.free_email_domain()}",
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            phone=fake.phone_number(),
            role=ROLE_ADMIN if i == 0 else ROLE_USER,
        )
        users.append(await user_models.save_user(user))
    return users


async def seed_adverts(users: list[User]) -> list[Advert]:
    print(f"Seeding {NUM_ADVERTS} adverts...")
    adverts = []
    for _ in range(NUM_ADVERTS):
        advert = Advert(
            id=None,
            author_id=random.choice(users).id,
            title=fake.catch_phrase()[:64],
            description=fake.sentence(nb_words=12),
            price=random.randint(1, 500) * 1000,
        )
        adverts.append(await advert_models.save_advert(advert))
    return adverts


async def seed_comments(users: list[User], adverts: list[Advert]) -> None:
    print(f"Seeding {NUM_COMMENTS} comments...")
    now = datetime.now()
    for _ in range(NUM_COMMENTS):
        comment = Comment(
            id=None,
            text=fake.text(max_nb_chars=60).strip()[:64].ljust(8, "."),
            created_at=now - timedelta(minutes=random.randint(0, 60 * 24 * 30)),
            advert_id=random.choice(adverts).id,
            author=random.choice(users),
        )
        await comment_models.save_comment(comment)


async def main() -> None:
    await init_db()
    try:
        await clear_existing_data()
        users = await seed_users()
        adverts = await seed_adverts(users)
        await seed_comments(users, adverts)

        admin_adverts = await advert_models.get_adverts_by_author(users[0].id)
        print(f"Done. Admin ({users[0].email}) owns {len(admin_adverts)} adverts.")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
