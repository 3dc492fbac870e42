from .analytics_views import *
from .auth_views import *
from .recipe_views import *
from .review_views import *
from .user_views import *
