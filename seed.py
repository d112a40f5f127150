from datetime import datetime, timedelta, timezone

from board_api.auth import get_password_hash
from board_api.database import SessionLocal, engine, Base
from board_api.models import Board, Category, Comment, Heart, User

# Create tables
Base.metadata.create_all(bind=engine)

db = SessionLocal()

# Clear existing data
db.query(Heart).delete()
db.query(Comment).delete()
db.query(Board).delete()
db.query(User).delete()

# Sample members
alice = User(
    email="alice@example.com",
    hashed_password=get_password_hash("alicepassword"),
    name="alice",
    image="https://picsum.photos/seed/alice/96",
)
bob = User(
    email="bob@example.com",
    hashed_password=get_password_hash("bobpassword"),
    name="bob",
    image="https://picsum.photos/seed/bob/96",
)
db.add_all([alice, bob])
db.flush()

now = datetime.now(timezone.utc)

# Sample boards, one hour apart
boards = [
    Board(
        member_id=alice.id if i % 2 == 0 else bob.id,
        title=title,
        content=content,
        category=category.value,
        image=f"https://picsum.photos/seed/board{i}/640/480",
        created_at=now - timedelta(hours=i),
    )
    for i, (title, content, category) in enumerate([
        ("Hello board", "First post on the board.", Category.FREE),
        ("How do I reset my password?", "The link in the mail expired.", Category.QUESTION),
        ("Weekend hike", "Took the long trail, worth it.", Category.REVIEW),
        ("Keyboard shortcuts", "Ctrl+K opens the search.", Category.TIP),
        ("Coffee near campus", "The new place on 3rd is great.", Category.REVIEW),
        ("Anyone up for chess?", "Thursdays after 6.", Category.FREE),
    ])
]
db.add_all(boards)
db.flush()

comments = [
    Comment(board_id=boards[0].id, member_id=bob.id, content="Welcome!"),
    Comment(board_id=boards[1].id, member_id=alice.id, content="Ask for a new link from the login page."),
]
hearts = [
    Heart(board_id=boards[0].id, member_id=bob.id),
    Heart(board_id=boards[2].id, member_id=alice.id),
    Heart(board_id=boards[2].id, member_id=bob.id),
]

db.add_all(comments)
db.add_all(hearts)
db.commit()

print("Database seeded successfully!")
print(f"  - 2 members")
print(f"  - {len(boards)} boards")
print(f"  - {len(comments)} comments")
print(f"  - {len(hearts)} hearts")

db.close()
