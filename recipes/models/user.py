"""Custom user model with profile metadata and the soft-delete state."""

from django.contrib.auth.models import AbstractUser, UserManager
from django.core.validators import MinValueValidator
from django.db import models

from .sequence import SequencedModel


class ActiveUserManager(UserManager):
    """Manager restricted to users that have not deleted their account."""

    def get_queryset(self):
        return super().get_queryset().filter(is_deleted=False)


class User(SequencedModel, AbstractUser):
    """Model for user auth and public profile info."""

    GENDER_MALE = "male"
    GENDER_FEMALE = "female"

    GENDER_CHOICES = [
        (GENDER_MALE, "Male"),
        (GENDER_FEMALE, "Female"),
    ]

    # display name, globally unique
    username = models.CharField(max_length=255, unique=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES)
    age = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    is_deleted = models.BooleanField(default=False)

    objects = UserManager()
    active = ActiveUserManager()

    REQUIRED_FIELDS = ["gender", "age"]

    class Meta:
        """Default ordering and DB-level profile constraints."""
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(age__gt=0), name="chk_user_age_positive"),
            models.CheckConstraint(
                condition=models.Q(gender__in=["male", "female"]),
                name="chk_user_gender",
            ),
        ]

    @property
    def display_name(self):
        """Public name shown next to recipes and reviews."""
        return self.username

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.username} ({self.id})"
