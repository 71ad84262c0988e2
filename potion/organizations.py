from .links import EMPTY_BODY
from .repository import Repository

LOOKUP_OPTIONS = ('headers', 'context')


def _lookup(options, keys=LOOKUP_OPTIONS):
    """
    Picks the options that also apply to the requests made to look up a parent resource.
    """
    return {key: options[key] for key in keys if key in options}


class OrganizationsMixin(object):
    """
    Methods for the organizations and teams API.

    Every method accepts keyword ``options`` that are merged into the request: ``headers``, ``query``,
    ``context``, and any other keyword as a request parameter (query string for GET and DELETE, JSON body
    otherwise). Methods for endpoints that answer ``204 No Content`` return ``True`` on success and ``False``
    otherwise.
    """

    def organization(self, org, **options):
        """
        Get an organization.

        :param str org: organization login
        :return: a :class:`potion.resource.Resource` representing the organization
        """
        return self.root.rels['organization'].get(options, {'uri': {'org': org}}).data

    def update_organization(self, org, values, **options):
        """
        Update an organization. Only the fields present in ``values`` are changed.

        :param str org: organization login
        :param dict values: organization fields, e.g. ``billing_email``, ``company``, ``email``, ``location``,
            ``name``
        :return: the updated organization
        """
        uri_options = {'uri': {'org': org}}
        options.update(values)
        return self.root.rels['organization'].patch(options, uri_options).data

    def organizations(self, username=None, **options):
        """
        List the organizations of a user, or those of the authenticated user if no ``username`` is given.

        Private memberships are only included for the authenticated user.
        """
        if username is not None:
            return self.user(username, **_lookup(options)).rels['organizations'].get(options).data
        return self.root.rels['user_organizations'].get(options).data

    def organization_repositories(self, org, **options):
        """
        List the repositories of an organization.

        :param str org: organization login
        :param str type: (optional) ``all``, ``public``, ``member`` or ``private``
        """
        return self.organization(org, **_lookup(options)).rels['repos'].get(options).data

    def organization_members(self, org, **options):
        return self.organization(org, **_lookup(options)).rels['members'].get(options).data

    def organization_teams(self, org, **options):
        return self.organization(org, **_lookup(options)).rels['teams'].get(options).data

    def create_team(self, org, **options):
        """
        Create a team in an organization.

        :param str org: organization login
        :param str name: team name
        :param list repo_names: (optional) ``owner/name`` of repositories for the team
        :param str permission: (optional) ``pull``, ``push`` or ``admin``
        :return: the new team
        """
        return self.organization(org, **_lookup(options)).rels['teams'].post(options).data

    def team(self, team_id, **options):
        return self.root.rels['team'].get(options, {'uri': {'team_id': team_id}}).data

    def update_team(self, team_id, **options):
        """
        :param int team_id: team id
        :param str name: (optional) team name
        :param str permission: (optional) permission of the team on its repositories
        :return: the updated team
        """
        uri_options = {'uri': {'team_id': team_id}}
        return self.root.rels['team'].patch(options, uri_options).data

    def delete_team(self, team_id, **options):
        uri_options = {'uri': {'team_id': team_id}}
        return self.root.rels['team'].delete(options, uri_options).status == 204

    def team_members(self, team_id, **options):
        return self.team(team_id, **_lookup(options)).rels['members'].get(options).data

    def add_team_member(self, team_id, user, **options):
        """
        Add a user to a team.

        :param int team_id: team id
        :param str user: login of the new member
        :return: ``True`` if the user was added
        """
        # The endpoint rejects a blank body unless the request says Content-Length: 0.
        members = self.team(team_id, **_lookup(options)).rels['members']
        uri_options = dict(_lookup(options, ('headers', 'query', 'context')), uri={'member': user})
        return members.put(EMPTY_BODY, uri_options).status == 204

    def remove_team_member(self, team_id, user, **options):
        # Sent with Content-Length: 0 like add_team_member; the endpoint treats both verbs the same way.
        members = self.team(team_id, **_lookup(options)).rels['members']
        uri_options = dict(_lookup(options, ('headers', 'query', 'context')), uri={'member': user})
        return members.delete(EMPTY_BODY, uri_options).status == 204

    def team_repositories(self, team_id, **options):
        return self.team(team_id, **_lookup(options)).rels['repositories'].get(options).data

    def add_team_repository(self, team_id, repo, **options):
        """
        Add a repository to a team. The repository must belong to the organization of the team.

        :param int team_id: team id
        :param repo: ``"owner/name"``, a mapping or a repository :class:`potion.resource.Resource`
        :return: ``True`` if the repository was added
        """
        uri_options = {'uri': Repository(repo).uri_params()}
        repositories = self.team(team_id, **_lookup(options)).rels['repositories']
        return repositories.put(options, uri_options).status == 204

    def remove_team_repository(self, team_id, repo, **options):
        """
        Remove a repository from a team. The repository itself is not deleted.
        """
        uri_options = {'uri': Repository(repo).uri_params()}
        repositories = self.team(team_id, **_lookup(options)).rels['repositories']
        return repositories.delete(options, uri_options).status == 204

    def remove_organization_member(self, org, user, **options):
        """
        Remove a user from an organization and all of its teams.
        """
        uri_options = {'uri': {'member': user}}
        members = self.organization(org, **_lookup(options)).rels['members']
        return members.delete(options, uri_options).status == 204

    def publicize_membership(self, org, user, **options):
        uri_options = {'uri': {'member': user}}
        public_members = self.organization(org, **_lookup(options)).rels['public_members']
        return public_members.put(options, uri_options).status == 204

    def unpublicize_membership(self, org, user, **options):
        uri_options = {'uri': {'member': user}}
        public_members = self.organization(org, **_lookup(options)).rels['public_members']
        return public_members.delete(options, uri_options).status == 204
