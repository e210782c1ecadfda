""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = '')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Uniqbot",
                                "version": "1.0",
                                "description": "Hybrid support chatbot: answers from curated \
                                patterns, product search or a generative model and \
                                queues unanswered questions for review."
                            }


# Database Constants
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'uniqverse')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')


# AI Provider Constants
AI_PROVIDER                     =   config('AI_PROVIDER', default = 'openai')
AI_REQUEST_TIMEOUT              =   config('AI_REQUEST_TIMEOUT', default = 20.0, cast = float)


# OpenAI Constants
OPENAI_API_KEY		            =	config('OPENAI_API_KEY', default = '')
OPENAI_DEFAULT_MODEL            =   "gpt-3.5-turbo"


# Anthropic Constants
ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_DEFAULT_MODEL         =   config('ANTHROPIC_DEFAULT_MODEL', default = 'claude-3-5-haiku-latest')


# Storefront Constants
STORE_BASE_URL                  =   config('STORE_BASE_URL', default = '')
SUPPORT_EMAIL                   =   config('SUPPORT_EMAIL', default = 'support@uniqverse.com')
