DEFAULT_LOGGING_FORMAT_STRING = (
    '%(asctime)s %(levelname)s %(process)d [%(name)s] '
    '%(filename)s:%(lineno)d - %(message)s'
)


def get_logger_config(log_dir='/var/tmp',
                      log_filename='enrollment_manager.log',
                      dev_env=False,
                      debug=False,
                      local_loglevel='INFO',
                      format_string=None):
    """
    Return the appropriate logging config dictionary. You should assign the
    result of this to the LOGGING var in your settings.

    Application logs always go to stdout. If dev_env is set to true they are
    also written to a rotating file in log_dir.
    """
    # Revert to INFO if an invalid string is passed in
    if local_loglevel not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
        local_loglevel = 'INFO'

    if format_string is None:
        format_string = DEFAULT_LOGGING_FORMAT_STRING

    handlers = ['console']

    logger_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': format_string,
            },
            'raw': {'format': '%(message)s'},
        },
        'handlers': {
            'console': {
                'level': 'DEBUG' if debug else 'INFO',
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'stream': 'ext://sys.stdout',
            },
        },
        'loggers': {
            'django': {
                'handlers': handlers,
                'propagate': True,
                'level': 'INFO'
            },
            'factory': {
                'handlers': handlers,
                'propagate': True,
                'level': 'WARNING'
            },
            'django.request': {
                'handlers': handlers,
                'propagate': True,
                'level': 'WARNING'
            },
            '': {
                'handlers': handlers,
                'level': 'DEBUG',
                'propagate': False
            },
        }
    }

    if dev_env:
        handlers.append('local')
        logger_config['handlers'].update({
            'local': {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': local_loglevel,
                'formatter': 'standard',
                'filename': f'{log_dir}/{log_filename}',
                'maxBytes': 1024 * 1024 * 2,
                'backupCount': 5,
            },
        })

    return logger_config
