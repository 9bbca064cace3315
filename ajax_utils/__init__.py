# ajax_utils - request building, transport and settings for ajax_client
