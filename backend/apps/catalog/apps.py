from django.apps import AppConfig


class CatalogConfig(AppConfig):
    name = 'apps.catalog'
    label = 'catalog'

    def ready(self):
        from apps.common.store import get_store
        from .seed import seed_catalog

        seed_catalog(get_store())
