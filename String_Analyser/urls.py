from django.apps import apps
from django.urls import path
from .views import StringAnalyzerView, StringDetailView, NaturalLanguageFilterView

store = apps.get_app_config('String_Analyser').store

urlpatterns = [
    path('strings', StringAnalyzerView.as_view(store=store), name='analyze_string'),
    path('strings/filter-by-natural-language',
         NaturalLanguageFilterView.as_view(store=store), name='nl_filter'),
    path('strings/<path:value>', StringDetailView.as_view(store=store), name='get_string'),

]
