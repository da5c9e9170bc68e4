"""Cypher templates for the Movies bounded context.

Every template is fixed text; user input only ever reaches the server
through the named ``$`` parameters bound by the driver.
"""

# Columns: title, released, tagline, votes, cast
# cast is a list of {name, type, roles} maps; people-less movies get [].
FIND_MOVIE_BY_TITLE = """
MATCH (movie:Movie {title: $title})
OPTIONAL MATCH (movie)<-[r]-(person:Person)
WITH movie,
     collect(
       CASE WHEN person IS NULL THEN null
       ELSE {name: person.name, type: type(r), roles: r.roles}
       END
     ) AS cast
RETURN movie.title AS title,
       movie.released AS released,
       movie.tagline AS tagline,
       movie.votes AS votes,
       cast
LIMIT 1
"""

# Bounded to one movie so the reported update count is 0 or 1.
VOTE_FOR_MOVIE = """
MATCH (movie:Movie {title: $title})
WITH movie
LIMIT 1
SET movie.votes = coalesce(movie.votes, 0) + 1
RETURN movie.votes AS votes
"""

# Columns: movie ({title, released, tagline, votes})
SEARCH_MOVIES_BY_TITLE = """
MATCH (movie:Movie)
WHERE toLower(movie.title) CONTAINS toLower($part)
RETURN movie {.title, .released, .tagline, .votes} AS movie
"""

# Columns: movie (title), cast (list of actor names)
BROWSE_ACTED_IN = """
MATCH (m:Movie)<-[:ACTED_IN]-(a:Person)
RETURN m.title AS movie, collect(a.name) AS cast
LIMIT $limit
"""
