from collections import namedtuple
from unittest import TestCase
from urllib.parse import urlsplit

from flask import Flask, json, jsonify, request

from potion import Client
from potion.transport import Transport

API_ENDPOINT = 'http://api.test'

RecordedRequest = namedtuple('RecordedRequest', ['method', 'url', 'headers', 'body', 'context'])


class FlaskTransport(Transport):
    """
    Sends requests to a Flask application through its test client and records them.
    """

    def __init__(self, app):
        self.app = app
        self.test_client = app.test_client()
        self.requests = []

    @property
    def last_request(self):
        return self.requests[-1]

    def execute(self, method, url, headers, body, context=None):
        self.requests.append(RecordedRequest(method, url, dict(headers), body, context))

        parts = urlsplit(url)
        response = self.test_client.open(parts.path,
                                         base_url='{}://{}'.format(parts.scheme, parts.netloc),
                                         query_string=parts.query,
                                         method=method,
                                         headers=headers,
                                         data=body)
        return response.status_code, response.headers, response.get_data()


def org_json(login):
    url = '{}/orgs/{}'.format(API_ENDPOINT, login)
    return {
        'login': login,
        'id': 9919,
        'url': url,
        'repos_url': url + '/repos',
        'members_url': url + '/members{/member}',
        'public_members_url': url + '/public_members{/member}',
        'teams_url': url + '/teams',
        'created_at': '2008-05-11T04:37:31Z'
    }


def team_json(team_id, name='Owners'):
    url = '{}/teams/{}'.format(API_ENDPOINT, team_id)
    return {
        'id': team_id,
        'name': name,
        'url': url,
        'members_url': url + '/members{/member}',
        'repositories_url': url + '/repos{/owner}{/repo}',
        'permission': 'admin'
    }


def user_json(login):
    url = '{}/users/{}'.format(API_ENDPOINT, login)
    return {
        'login': login,
        'url': url,
        'organizations_url': url + '/orgs',
        'repos_url': url + '/repos'
    }


def repo_json(owner, name):
    return {
        'name': name,
        'full_name': '{}/{}'.format(owner, name),
        'owner': user_json(owner),
        'url': '{}/repos/{}/{}'.format(API_ENDPOINT, owner, name)
    }


def not_found():
    return jsonify({'message': 'Not Found'}), 404


def create_app():
    """
    A small stand-in for the organizations API. Unknown organizations, teams and the user ``ghost`` answer 404.
    """
    app = Flask(__name__)
    app.debug = True

    @app.route('/user')
    def current_user():
        return jsonify(user_json('octocat'))

    @app.route('/users/<user>')
    def user(user):
        if user == 'ghost':
            return not_found()
        return jsonify(user_json(user))

    @app.route('/user/orgs')
    def user_orgs():
        return json.dumps([org_json('github')]), 200, {'Content-Type': 'application/json; charset=utf-8'}

    @app.route('/users/<user>/orgs')
    def orgs_for_user(user):
        return jsonify([org_json('github'), org_json('{}-org'.format(user))])

    @app.route('/orgs/<org>', methods=['GET', 'PATCH'])
    def organization(org):
        if org == 'ghost':
            return not_found()

        data = org_json(org)
        if request.method == 'PATCH':
            data.update(request.get_json())
        return jsonify(data)

    @app.route('/orgs/<org>/repos')
    def organization_repositories(org):
        repos = [repo_json(org, 'developer.github.com'), repo_json(org, 'linguist')]
        return jsonify(repos), 200, {
            'Link': '<{0}/orgs/{1}/repos?page=2>; rel="next", <{0}/orgs/{1}/repos?page=5>; rel="last"'.format(
                API_ENDPOINT, org)
        }

    @app.route('/orgs/<org>/members')
    def organization_members(org):
        return jsonify([user_json('octocat'), user_json('defunkt')])

    @app.route('/orgs/<org>/members/<member>', methods=['DELETE'])
    def remove_organization_member(org, member):
        if member == 'ghost':
            return not_found()
        return '', 204

    @app.route('/orgs/<org>/public_members/<member>', methods=['PUT', 'DELETE'])
    def public_membership(org, member):
        if member == 'ghost':
            return not_found()
        return '', 204

    @app.route('/orgs/<org>/teams', methods=['GET', 'POST'])
    def organization_teams(org):
        if request.method == 'POST':
            data = request.get_json()
            team = team_json(1001, data['name'])
            team['permission'] = data.get('permission', 'pull')
            return jsonify(team), 201
        return jsonify([team_json(100000), team_json(100001, 'Developers')])

    @app.route('/teams/<int:team_id>', methods=['GET', 'PATCH', 'DELETE'])
    def team(team_id):
        if team_id != 100000:
            return not_found()
        if request.method == 'DELETE':
            return '', 204

        data = team_json(team_id)
        if request.method == 'PATCH':
            data.update(request.get_json())
        return jsonify(data)

    @app.route('/teams/<int:team_id>/members')
    def team_members(team_id):
        return jsonify([user_json('octocat')])

    @app.route('/teams/<int:team_id>/members/<member>', methods=['PUT', 'DELETE'])
    def team_membership(team_id, member):
        if member == 'ghost':
            return not_found()
        return '', 204

    @app.route('/teams/<int:team_id>/repos')
    def team_repositories(team_id):
        return jsonify([repo_json('github', 'developer.github.com')])

    @app.route('/teams/<int:team_id>/repos/<owner>/<repo>', methods=['PUT', 'DELETE'])
    def team_repository(team_id, owner, repo):
        if owner != 'github':
            return not_found()
        return '', 204

    @app.route('/text')
    def text():
        return 'Hello', 200, {'Content-Type': 'text/plain'}

    return app


class BaseTestCase(TestCase):

    def setUp(self):
        self.app = self.create_app()
        self.transport = FlaskTransport(self.app)
        self.client = Client(API_ENDPOINT, transport=self.transport)

    def create_app(self):
        return create_app()

    @property
    def requests(self):
        return self.transport.requests

    @property
    def last_request(self):
        return self.transport.last_request
