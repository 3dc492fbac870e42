"""Model for the ingredient set of a recipe."""

from django.db import models

from .recipe import Recipe


class Ingredient(models.Model):
    """One ingredient of a recipe; unique per recipe, unordered."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column="recipe_id",
        related_name="ingredients",
    )

    name = models.CharField(max_length=500)

    class Meta:
        """One row per (recipe, name) pair."""
        db_table = "recipe_ingredient"
        constraints = [
            models.UniqueConstraint(fields=["recipe", "name"], name="uniq_ingredient_recipe_name"),
        ]

    def save(self, *args, **kwargs):
        """Strip surrounding whitespace before saving."""
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    def __str__(self):
        """Readable ingredient string."""
        return f"{self.name} ({self.recipe_id})"
