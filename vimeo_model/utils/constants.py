"""
Constantes globales pour vimeo-model.

Ce module contient les jetons echanges avec l'API et interpretes par le client :
- En-tete et valeur de challenge pour un jeton invalide
- Capacite "POST" annoncee dans les options d'une connexion
- Suffixe de l'endpoint de recommandations
"""

# En-tete de challenge d'authentification (reponses 401)
AUTHENTICATION_HEADER = "WWW-Authenticate"

# Valeur exacte du challenge quand le jeton d'acces est invalide
AUTHENTICATION_TOKEN_ERROR = 'Bearer error="invalid_token"'

# Capacite annoncee dans `options` quand la collection accepte un ajout
OPTIONS_POST = "POST"

# Suffixe ajoute a l'URI d'une video sans connexion `recommendations`
ENDPOINT_RECOMMENDATIONS = "/recommendations"
