from django.urls import path

from .views import NaturalLanguageFilterView, StringAnalyzerView, StringDetailView

# The natural-language route must come before strings/<value>, which would
# otherwise capture "filter-by-natural-language" as a value.
urlpatterns = [
    path('strings', StringAnalyzerView.as_view(), name='analyze_string'),
    path('strings/filter-by-natural-language',
         NaturalLanguageFilterView.as_view(), name='nl_filter'),
    path('strings/<str:value>', StringDetailView.as_view(), name='string_detail'),
]
