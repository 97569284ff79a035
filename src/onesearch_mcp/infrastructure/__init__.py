"""Infrastructure Layer - external API integration."""
