"""Mixed marketplace workload scenario.

Combines the catalog and shopping journeys with weights that model
realistic marketplace traffic. This is the recommended scenario for load
baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.catalog import BrowseCatalogJourney, VendorCatalogJourney
from loadtests.scenarios.shopping import CartAbandonmentJourney, CartToCheckoutJourney


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload.

    Browsing dominates; vendor maintenance is the least frequent activity.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowseCatalogJourney: 10,
        CartAbandonmentJourney: 4,
        CartToCheckoutJourney: 3,
        VendorCatalogJourney: 2,
    }
