"""
vimeo-model - Modele de domaine cote client pour l'API video Vimeo.

Ce package decode les enregistrements renvoyes par l'API (videos, utilisateurs,
erreurs) et expose l'etat derive : lecture possible, type d'achat TVOD,
compteurs d'engagement et classification des erreurs.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, objets valeur, erreurs, ports)
- adapters/ : Couche infrastructure (deserialiseur JSON, conversion httpx, CLI)
"""

__version__ = "0.1.0"
