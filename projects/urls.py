from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("associations/", include("associated_taxonomies.core.associations.urls")),
    path("", include("associated_taxonomies.core.terms.urls")),
    # path('__debug__/', include('debug_toolbar.urls')),
]
