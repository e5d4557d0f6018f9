"""VillageConnect - local business directory API."""
