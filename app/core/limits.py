# Límites de las columnas en PostgreSQL: INTEGER y VARCHAR(n)
INT_MAX = 2**31 - 1

NAME_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 50
