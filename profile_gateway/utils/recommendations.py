# profile_gateway/utils/recommendations.py
"""
Recomendaciones heurísticas de perfil.

Cuatro chequeos independientes, en orden fijo; cada uno agrega 0 o 1 mensaje:
  1) bio vacía o ausente
  2) 6 o más repos -> fijar los mejores
  3) algún repo sin topics -> se nombra el primero (orden de GitHub)
  4) ningún repo se llama como el usuario (case-insensitive) -> profile README

El chequeo 4 solo compara nombres; no verifica que exista un README.
"""
from typing import List, Optional

PIN_THRESHOLD = 6

MSG_BIO = "Add a bio to your GitHub profile to tell others about yourself."
MSG_PIN = "Consider pinning your best repositories for better visibility."
MSG_TOPICS = "Add topics to your repositories (e.g., {name}) for better discoverability."
MSG_README = "Create a profile README to showcase your work."


def first_repo_without_topics(repos: List[dict]) -> Optional[dict]:
    for r in repos:
        if not r.get("topics"):
            return r
    return None


def has_profile_repo(username: str, repos: List[dict]) -> bool:
    target = username.lower()
    return any(isinstance(r.get("name"), str) and r["name"].lower() == target for r in repos)


def build_recommendations(username: str, profile: dict, repos: List[dict]) -> List[str]:
    recommendations: List[str] = []

    if not profile.get("bio"):
        recommendations.append(MSG_BIO)

    if len(repos) >= PIN_THRESHOLD:
        recommendations.append(MSG_PIN)

    bare = first_repo_without_topics(repos)
    if bare is not None:
        recommendations.append(MSG_TOPICS.format(name=bare.get("name")))

    if not has_profile_repo(username, repos):
        recommendations.append(MSG_README)

    return recommendations
