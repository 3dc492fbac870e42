"""
URL configuration for the recipeshare project.

Everything under /api/ is served by the recipes app's DRF views.
"""
from django.contrib import admin
from django.urls import path

from recipes import views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/register', views.RegisterApi.as_view(), name='register_api'),
    path('api/auth/login', views.LoginApi.as_view(), name='login_api'),
    path('api/users/profile', views.ProfileApi.as_view(), name='profile_api'),
    path('api/users/<int:user_id>', views.UserDetailApi.as_view(), name='user_detail_api'),
    path('api/users/<int:user_id>/follow', views.FollowApi.as_view(), name='follow_api'),
    path('api/users/<int:user_id>/followers', views.FollowersListApi.as_view(), name='followers_api'),
    path('api/users/<int:user_id>/following', views.FollowingListApi.as_view(), name='following_api'),
    path('api/feed', views.FeedApi.as_view(), name='feed_api'),
    path('api/recipes', views.RecipeListApi.as_view(), name='recipe_list_api'),
    path('api/recipes/<int:recipe_id>', views.RecipeDetailApi.as_view(), name='recipe_detail_api'),
    path('api/recipes/<int:recipe_id>/times', views.RecipeTimesApi.as_view(), name='recipe_times_api'),
    path('api/recipes/<int:recipe_id>/reviews', views.RecipeReviewsApi.as_view(), name='recipe_reviews_api'),
    path(
        'api/recipes/<int:recipe_id>/reviews/<int:review_id>',
        views.RecipeReviewDetailApi.as_view(),
        name='recipe_review_detail_api',
    ),
    path('api/reviews/<int:review_id>/like', views.ReviewLikeApi.as_view(), name='review_like_api'),
    path('api/reviews/<int:review_id>/unlike', views.ReviewUnlikeApi.as_view(), name='review_unlike_api'),
    path('api/analytics/closest-calorie-pair', views.ClosestCaloriePairApi.as_view(), name='closest_calorie_pair_api'),
    path('api/analytics/complex-recipes', views.ComplexRecipesApi.as_view(), name='complex_recipes_api'),
    path('api/analytics/follow-ratio', views.FollowRatioApi.as_view(), name='follow_ratio_api'),
]
