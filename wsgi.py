from quiz_api import create_app
from quiz_api.bootstrap import main
from dotenv import load_dotenv
load_dotenv()

application = create_app()

if __name__ == "__main__":
    raise SystemExit(main(application))
