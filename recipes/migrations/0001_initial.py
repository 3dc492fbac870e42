import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import recipes.models.user


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='IdSequence',
            fields=[
                ('name', models.CharField(max_length=100, primary_key=True, serialize=False)),
                ('next_value', models.BigIntegerField(default=1)),
            ],
            options={
                'db_table': 'id_sequence',
            },
        ),
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email address')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('id', models.BigIntegerField(editable=False, primary_key=True, serialize=False)),
                ('username', models.CharField(max_length=255, unique=True)),
                ('gender', models.CharField(choices=[('male', 'Male'), ('female', 'Female')], max_length=10)),
                ('age', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('is_deleted', models.BooleanField(default=False)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'ordering': ['id'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('age__gt', 0)), name='chk_user_age_positive'),
                    models.CheckConstraint(condition=models.Q(('gender__in', ['male', 'female'])), name='chk_user_gender'),
                ],
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
                ('active', recipes.models.user.ActiveUserManager()),
            ],
        ),
        migrations.CreateModel(
            name='Recipe',
            fields=[
                ('id', models.BigIntegerField(editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=500)),
                ('description', models.TextField(blank=True, null=True)),
                ('category', models.CharField(blank=True, max_length=255, null=True)),
                ('cook_time', models.CharField(blank=True, max_length=50, null=True)),
                ('prep_time', models.CharField(blank=True, max_length=50, null=True)),
                ('total_time', models.CharField(blank=True, max_length=50, null=True)),
                ('date_published', models.DateTimeField(blank=True, null=True)),
                ('aggregated_rating', models.DecimalField(blank=True, decimal_places=2, max_digits=3, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)])),
                ('review_count', models.PositiveIntegerField(default=0)),
                ('calories', models.FloatField(blank=True, null=True)),
                ('fat_content', models.FloatField(blank=True, null=True)),
                ('saturated_fat_content', models.FloatField(blank=True, null=True)),
                ('cholesterol_content', models.FloatField(blank=True, null=True)),
                ('sodium_content', models.FloatField(blank=True, null=True)),
                ('carbohydrate_content', models.FloatField(blank=True, null=True)),
                ('fiber_content', models.FloatField(blank=True, null=True)),
                ('sugar_content', models.FloatField(blank=True, null=True)),
                ('protein_content', models.FloatField(blank=True, null=True)),
                ('servings', models.PositiveIntegerField(blank=True, null=True)),
                ('recipe_yield', models.CharField(blank=True, max_length=100, null=True)),
                ('author', models.ForeignKey(db_column='author_id', on_delete=django.db.models.deletion.PROTECT, related_name='recipes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'recipe',
                'indexes': [
                    models.Index(fields=['author'], name='recipe_author_idx'),
                    models.Index(fields=['category'], name='recipe_category_idx'),
                    models.Index(fields=['date_published'], name='recipe_date_published_idx'),
                    models.Index(fields=['calories'], name='recipe_calories_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Ingredient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=500)),
                ('recipe', models.ForeignKey(db_column='recipe_id', on_delete=django.db.models.deletion.CASCADE, related_name='ingredients', to='recipes.recipe')),
            ],
            options={
                'db_table': 'recipe_ingredient',
                'constraints': [
                    models.UniqueConstraint(fields=('recipe', 'name'), name='uniq_ingredient_recipe_name'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.BigIntegerField(editable=False, primary_key=True, serialize=False)),
                ('rating', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('text', models.TextField(blank=True, default='')),
                ('date_submitted', models.DateTimeField(default=django.utils.timezone.now)),
                ('date_modified', models.DateTimeField(default=django.utils.timezone.now)),
                ('author', models.ForeignKey(db_column='author_id', on_delete=django.db.models.deletion.PROTECT, related_name='reviews', to=settings.AUTH_USER_MODEL)),
                ('recipe', models.ForeignKey(db_column='recipe_id', on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='recipes.recipe')),
            ],
            options={
                'db_table': 'review',
                'indexes': [
                    models.Index(fields=['recipe', 'date_modified'], name='review_recipe_modified_idx'),
                    models.Index(fields=['author'], name='review_author_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('rating__gte', 1), ('rating__lte', 5)), name='chk_review_rating_range'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Like',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('review', models.ForeignKey(db_column='review_id', on_delete=django.db.models.deletion.CASCADE, related_name='likes', to='recipes.review')),
                ('user', models.ForeignKey(db_column='user_id', on_delete=django.db.models.deletion.CASCADE, related_name='review_likes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'review_like',
                'constraints': [
                    models.UniqueConstraint(fields=('review', 'user'), name='uniq_like_review_user'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Follower',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('followee', models.ForeignKey(db_column='followee_id', on_delete=django.db.models.deletion.CASCADE, related_name='followers', to=settings.AUTH_USER_MODEL)),
                ('follower', models.ForeignKey(db_column='follower_id', on_delete=django.db.models.deletion.CASCADE, related_name='following', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'followers',
                'indexes': [
                    models.Index(fields=['followee', 'follower'], name='followers_followee_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('follower', 'followee'), name='uniq_followers_pair'),
                    models.CheckConstraint(condition=models.Q(('follower', models.F('followee')), _negated=True), name='chk_followers_not_self'),
                ],
            },
        ),
    ]
