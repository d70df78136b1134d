from enum import Enum

class PricingOptionName(str, Enum):
    TOTAL_PRICE = "total_price"
    FINANCED = "financed"
    MONTHLY_PLAN = "monthly_plan"
    SPECIAL_PROMOTION = "special_promotion"
    DISTRIBUTOR = "distributor"

class PricingRegime(str, Enum):
    STANDARD = "standard"
    DISTRIBUTOR = "distributor"
    PROMOTION = "promotion"

class KioskType(str, Enum):
    REAR_LOAD = "rear_load"
    FRONT_LOAD = "front_load"
    CREDIT_BILL = "credit_bill"
    CREDIT_ONLY = "credit_only"
