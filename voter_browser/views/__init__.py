from .gender_view import GenderDistributionView
from .age_distribution_view import AgeDistributionView
from .municipality_view import MunicipalityVotersView
from .ward_trend_view import WardGenderTrendView
from .booth_view import BoothGenderView
from .age_group_view import AgeGroupGenderView
from .municipality_profile_view import MunicipalityProfileView
from .ward_scatter_view import WardSizeAgeView
from .geography_view import GeographyTreemapView

__all__ = [
    "GenderDistributionView",
    "AgeDistributionView",
    "MunicipalityVotersView",
    "WardGenderTrendView",
    "BoothGenderView",
    "AgeGroupGenderView",
    "MunicipalityProfileView",
    "WardSizeAgeView",
    "GeographyTreemapView",
]
