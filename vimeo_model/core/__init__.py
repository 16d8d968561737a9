"""
Couche domaine (core).

Contient les entites, objets valeur, l'enregistrement d'erreur et les ports.
Cette couche n'a AUCUNE dependance vers l'infrastructure (httpx, CLI, JSON).

Sous-packages :
- entities/ : Video, User et le mixin d'acces au graphe d'engagement
- value_objects/ : Enums de statut, lecture, connexions/interactions, badges
- ports/ : Contrat du deserialiseur (collaborateur externe)
"""
