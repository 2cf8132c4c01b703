"""
Database initialization script.
"""
from app.db.session import close_client, get_database, init_db

if __name__ == "__main__":
    print("Initializing database...")
    init_db(get_database())
    close_client()
    print("Database initialized successfully!")
