from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# PRIORITY (maintenance + reports)
# -----------------------------------------------------
class Priority(BaseStrEnum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


# -----------------------------------------------------
# WORK STATUS (maintenance + reports)
# -----------------------------------------------------
class WorkStatus(BaseStrEnum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


# -----------------------------------------------------
# INVESTMENT STATUS
# -----------------------------------------------------
class InvestmentStatus(BaseStrEnum):
    """Dutch workflow labels, as stored."""

    afwachting = "afwachting"
    voorbereiding = "voorbereiding"
    uitvoering = "uitvoering"
    gereed = "gereed"


class InvestmentType(BaseStrEnum):
    school_wish = "school_wish"
    necessary = "necessary"
    sustainability = "sustainability"
    advies = "advies"


# -----------------------------------------------------
# QUOTE STATUS (offertes)
# -----------------------------------------------------
class QuoteStatus(BaseStrEnum):
    draft = "draft"
    sent = "sent"
    accepted = "accepted"
    rejected = "rejected"
    expired = "expired"


# -----------------------------------------------------
# APPOINTMENTS
# -----------------------------------------------------
class ActivityType(BaseStrEnum):
    onderhoud = "onderhoud"
    keuring = "keuring"
    opname = "opname"
    bespreking = "bespreking"


# -----------------------------------------------------
# BUILDING INVENTORY
# -----------------------------------------------------
class InstallationType(BaseStrEnum):
    w_installation = "w_installation"
    e_installation = "e_installation"


class FloorLevel(BaseStrEnum):
    fundering = "fundering"
    begane_grond = "begane_grond"
    eerste_verdieping = "eerste_verdieping"
    tweede_verdieping = "tweede_verdieping"
    dak = "dak"


class DrawingCategory(BaseStrEnum):
    bouwkundig = "bouwkundig"
    w_installatie = "w-installatie"
    e_installatie = "e-installatie"
    veiligheid = "veiligheid"
    afwerking = "afwerking"
    terrein = "terrein"
    overig = "overig"


# -----------------------------------------------------
# CONTACTS
# -----------------------------------------------------
class ContactCategory(BaseStrEnum):
    bouwkundige_aannemer = "bouwkundige_aannemer"
    directie_en_medewerkers = "directie_en_medewerkers"
    elektrotechnisch = "elektrotechnisch"
    gemeente = "gemeente"
    inbraak_en_brandveiligheid = "inbraak_en_brandveiligheid"
    schoonmaakdiensten = "schoonmaakdiensten"
    schilder_en_glaswerken = "schilder_en_glaswerken"
    terrein_inrichting = "terrein_inrichting"
    werktuigbouwkundig = "werktuigbouwkundig"
    zonwering = "zonwering"
