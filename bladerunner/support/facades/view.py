"""
View Facade
"""
from bladerunner.support.facades.facade import Facade


class View(Facade):
    """
    View Facade

    Provides static-like access to the view factory

    Usage:
        View.make('pages.home', {'title': 'Home'}).render()
        View.share('site_name', 'Acme')
        View.composer('pages.*', add_menu)
        if View.exists('errors.404'):
            ...
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'view'
