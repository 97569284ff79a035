"""
MCP Server Instructions - usage guide for AI agents.

Kept apart from server.py so the text can be maintained on its own.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
OneSearch MCP Server - search NEJM Group journals

Journals (context): New England Journal of Medicine (nejm), NEJM Catalyst (catalyst),
NEJM Evidence (evidence), NEJM AI (nejm-ai), NEJM Clinician / Journal Watch (clinician),
or all of them at once (federated, also "All").

## Which tool?
- Keyword search in one journal or all journals -> simple_query
    simple_query(context="NEJM Catalyst", query="diabetes")
    simple_query(context="All", query="sepsis")
- Full text of an article you already have a DOI for -> fetch_by_doi
    fetch_by_doi(doi="10.1056/NEJMoa2502866")
  Returns the raw JATS XML document. DOIs start with 10.1056/.
- Articles similar to a DOI -> more_like_this
    more_like_this(doi="10.1056/NEJMoa2502866")
- Latest articles of one type in one journal -> browse_article_type
    browse_article_type(context="nejm", article_type="Review Article")

## Output
- List tools return one item per article (Title, DOI, Journal, Publication Date).
  Pass output_style="links" to get doi: resource links instead.
- An empty list means no matches; it is not an error.
- Failures come back as a single text item flagged isError.

## Resources
- doi://{prefix}/{suffix}      article document, e.g. doi://10.1056/NEJMoa2502866
- onesearch://contexts         context codes and accepted journal names
- onesearch://article-types    article types accepted by browse_article_type
"""
