# =============================================================================
# core/prompts.py  —  Text handed back to the LLM
# =============================================================================
#
# Two pieces of prompt text:
#   - the recommendation brief that precedes every non-empty search result
#   - the shelter-email information collector served as an MCP prompt
#
# Both are plain strings so the tool layer can return them as-is.
# =============================================================================

import json

_EXAMPLE_ANIMAL = {
    "id": 77830183,
    "organization_id": "CA912",
    "url": "https://www.petfinder.com/cat/yale-77830183/ca/milpitas/humane-society-silicon-valley-ca912/",
    "type": "Cat",
    "species": "Cat",
    "breeds": {"primary": "Domestic Medium Hair", "secondary": None, "mixed": True, "unknown": False},
    "colors": {"primary": None, "secondary": None, "tertiary": None},
    "age": "Baby",
    "gender": "Male",
    "size": "Small",
    "coat": None,
    "attributes": {
        "spayed_neutered": False,
        "house_trained": False,
        "declawed": False,
        "special_needs": False,
        "shots_current": True,
    },
    "environment": {"children": True, "dogs": None, "cats": True},
    "tags": [],
    "name": "Yale",
    "description": "Hello! Are you looking for a social kitty who loves getting showered with attention?",
    "status": "adoptable",
    "published_at": "2025-08-17T06:40:47+0000",
    "distance": 10.3587,
    "contact": {
        "email": "adoptions@hssv.org",
        "phone": "(408) 262-2133",
        "address": {
            "address1": "901 Ames Ave.",
            "address2": None,
            "city": "Milpitas",
            "state": "CA",
            "postcode": "95035",
            "country": "US",
        },
    },
}


def get_recommendation_prompt() -> str:
    """Instructions for turning raw search results into recommendations."""
    example = json.dumps(_EXAMPLE_ANIMAL)
    url = _EXAMPLE_ANIMAL["url"]
    return f"""You are an expert in recommending adoptable animals based on the user's search criteria.
You excel at finding the best matches for people looking to adopt a pet.

Recommend at least three animals from the search results based on the user's
preferences, and include the url for each animal.  Present them as a
bullet-point list that focuses on what the user asked for.

At the end, ask the user whether:
  1. they need help drafting an email to the shelter.  If yes, collect some
     information from them before drafting it.
  2. they want to learn more about any of the animals.

Example:
<user>
I am looking for a cat that is good with children and dogs, and I live in San Francisco.
</user>
<data>
{example}
</data>
<assistant>
We have found the following animals that match your criteria:
1. Yale - A baby Domestic Medium Hair cat, good with children and cats. [View Yale]({url})
Do you need help drafting an email to the shelter to ask about this animal? If so, I can
collect some information from you first. Or would you like to learn more about the animals?
</assistant>
"""


SHELTER_EMAIL_PROMPT = """You are an expert in collecting user information to draft an email to an animal shelter.

Collect the following information from the user:
- Preferred animals from the recommendations
- Whether they have children
- Whether they have cats
- Whether they have dogs
- Whether they have kids visiting frequently
- Whether this is their first time owning a pet
- Whether they are renting or own their home

Create a bullet-point list of the questions you need to ask the user.
The collected information will be used to draft an email to the shelter that asks
about the animals and introduces the user.  The tone should be friendly and professional.
"""
