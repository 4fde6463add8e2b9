"""Ratings of offers and of users as lessor or lessee."""
