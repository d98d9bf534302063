"""
Blade Facade
"""
from bladerunner.support.facades.facade import Facade


class Blade(Facade):
    """
    Blade compiler Facade

    Usage:
        Blade.directive('money', lambda amount: f"${amount:,.2f}")
        Blade.filter('shout', str.upper)
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'blade.compiler'
