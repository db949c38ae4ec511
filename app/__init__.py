"""Array Data Processor — Flask MVC application.

Package layout:
    app/
    ├── domain/        # Enums and errors
    ├── models/        # Classification core + Pydantic schemas
    ├── controllers/   # Request orchestration (identity, health, info)
    ├── views/         # Flask routes (HTTP layer) and text presenter
    └── services/      # HTTP client with local fallback
"""

__version__ = "1.0.0"
