"""Explicit id arena for tables whose ids may also be loaded from outside."""

import logging

from django.db import models, transaction
from django.db.models import Max

logger = logging.getLogger(__name__)


class IdSequenceManager(models.Manager):
    """Allocate and advance per-table id counters."""

    def _locked_row(self, model):
        """Return the locked counter row for a model, creating it at max(id)+1."""
        name = model._meta.db_table
        return self.select_for_update().get_or_create(
            name=name,
            defaults={"next_value": lambda: _max_id(model) + 1},
        )[0]

    def next_value(self, model) -> int:
        """Hand out the next id for the model's table."""
        with transaction.atomic():
            row = self._locked_row(model)
            value = row.next_value
            row.next_value = value + 1
            row.save(update_fields=["next_value"])
        return value

    def advance_past_max(self, model) -> int:
        """Raise the counter to at least max(id)+1; never lower it."""
        with transaction.atomic():
            row = self._locked_row(model)
            floor = _max_id(model) + 1
            if row.next_value < floor:
                logger.info("Advancing %s id sequence %s -> %s", row.name, row.next_value, floor)
                row.next_value = floor
                row.save(update_fields=["next_value"])
        return row.next_value


def _max_id(model) -> int:
    return model.objects.aggregate(top=Max("pk"))["top"] or 0


class IdSequence(models.Model):
    """Next id to hand out for one table."""

    name = models.CharField(max_length=100, primary_key=True)
    next_value = models.BigIntegerField(default=1)

    objects = IdSequenceManager()

    class Meta:
        """Table name for id counters."""
        db_table = "id_sequence"

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.name} -> {self.next_value}"


class SequencedModel(models.Model):
    """Abstract base assigning the primary key from the id arena on first save."""

    id = models.BigIntegerField(primary_key=True, editable=False)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        """Allocate an id for new rows before inserting."""
        if self.pk is None:
            self.pk = IdSequence.objects.next_value(type(self))
            kwargs["force_insert"] = True
            kwargs.pop("force_update", None)
        super().save(*args, **kwargs)
