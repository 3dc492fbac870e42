from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from recipes.models import Follower, IdSequence, Ingredient, Recipe, Review, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for accounts, exposing profile fields and the soft-delete flag."""
    list_display = ('id', 'username', 'gender', 'age', 'is_deleted', 'is_staff')
    list_filter = ('is_deleted', 'gender', 'is_staff')
    search_fields = ('username',)
    ordering = ('id',)
    fieldsets = BaseUserAdmin.fieldsets + (('Profile', {'fields': ('gender', 'age', 'is_deleted')}),)
    add_fieldsets = BaseUserAdmin.add_fieldsets + (('Profile', {'fields': ('gender', 'age')}),)


class IngredientInline(admin.TabularInline):
    model = Ingredient
    extra = 0


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes; aggregate columns are maintained by the engine only."""
    list_display = ('id', 'name', 'author', 'category', 'aggregated_rating', 'review_count', 'date_published')
    list_filter = ('category',)
    search_fields = ('name', 'description', 'author__username')
    readonly_fields = ('aggregated_rating', 'review_count')
    raw_id_fields = ('author',)
    inlines = [IngredientInline]


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('id', 'recipe', 'author', 'rating', 'date_modified', 'short_text')
    search_fields = ('text', 'author__username')
    raw_id_fields = ('recipe', 'author')

    def short_text(self, obj):
        """Shorten review text for list display."""
        return obj.text[:50] + "..." if len(obj.text) > 50 else obj.text


@admin.register(Follower)
class FollowerAdmin(admin.ModelAdmin):
    list_display = ('follower', 'followee', 'created_at')
    raw_id_fields = ('follower', 'followee')


@admin.register(IdSequence)
class IdSequenceAdmin(admin.ModelAdmin):
    list_display = ('name', 'next_value')
    readonly_fields = ('name',)
