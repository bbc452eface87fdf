"""
Blog Seed - Database Seed Scripts.

- data/: Seed document (data.json), media files (uploads/) and their types
- seeders/: Reusable seeding logic
- first_run.py: First-run flag check
- run_all_seeds.py: Import orchestration and startup bootstrap

Run the seeds outside the API:
    python -m database.seeds.run_all_seeds
"""

from database.seeds.run_all_seeds import (
    BootstrapState,
    bootstrap,
    import_seed_data,
    run_all_seeds,
    seed_example_app,
)

__all__ = [
    "BootstrapState",
    "bootstrap",
    "import_seed_data",
    "run_all_seeds",
    "seed_example_app",
]
