from saltaire_guide.content.electricians import ELECTRICIANS
from saltaire_guide.content.gardeners import GARDENERS
from saltaire_guide.content.locksmiths import LOCKSMITHS
from saltaire_guide.content.pet_sitters import PET_SITTERS
from saltaire_guide.content.plumbers import PLUMBERS
from saltaire_guide.content.taxis import TAXIS
from saltaire_guide.content.tutors import TUTORS
from saltaire_guide.content.vets import VETS

# Hub order
CATEGORIES = [
    PLUMBERS,
    ELECTRICIANS,
    LOCKSMITHS,
    GARDENERS,
    PET_SITTERS,
    VETS,
    TUTORS,
    TAXIS,
]
