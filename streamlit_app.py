# streamlit_app.py - Fruit Memory Match
#
# Run:  streamlit run streamlit_app.py

from fruit_match.app import main

if __name__ == "__main__":
    main()
