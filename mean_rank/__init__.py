"""
Mean Score Ranking - Core Package

This package contains the core modules for:
- Game-play log ingestion (mean_rank.ingestion)
- Score aggregation and ranking (mean_rank.scoring)
- Shared configuration, errors and utilities
"""

__version__ = "1.0.0"
