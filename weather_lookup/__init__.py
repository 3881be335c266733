# ABOUTME: Weather lookup package: Open-Meteo backed lookup service and its client.
# ABOUTME: See weather_lookup.web for the HTTP app and weather_lookup.client for the UI state.
