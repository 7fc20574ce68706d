"""Infrastructure: SQLAlchemy persistence (models, repositories, migrations)."""
